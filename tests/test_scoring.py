import pytest

from reddit_oracle.records import Prediction, ReferencePost
from reddit_oracle.scoring.calculator import category_of, score, share_category


def _prediction(subreddit: str, title: str) -> Prediction:
    return Prediction(user="tester", subreddit=subreddit, title=title, reason="hunch")


def test_exact_match_scores_210(top_post):
    total, breakdown = score(_prediction("memes", "Funny cat"), top_post)

    assert total == 210
    assert breakdown.participation == 10
    assert breakdown.subreddit_points == 100
    assert breakdown.title_points == 100
    assert breakdown.streak_bonus == 0
    assert breakdown.total == total
    assert breakdown.subreddit_match == "exact"
    assert breakdown.title_match == "exact"


def test_whitespace_and_case_are_ignored(top_post):
    total, _ = score(_prediction("  MEMES ", " FUNNY CAT  "), top_post)
    assert total == 210


def test_category_match():
    post = ReferencePost(subreddit="soccer", title="abc")
    _, breakdown = score(_prediction("nba", "xyz"), post)

    assert breakdown.subreddit_points == 50
    assert breakdown.subreddit_match == "category"


def test_exact_beats_category():
    post = ReferencePost(subreddit="NBA", title="abc")
    _, breakdown = score(_prediction("nba", "xyz"), post)
    assert breakdown.subreddit_points == 100


def test_overlapping_categories():
    """technology sits in both news and science."""
    assert category_of("Technology") == frozenset({"news", "science"})
    assert share_category("technology", "space")
    assert share_category("technology", "worldnews")
    assert not share_category("space", "worldnews")
    assert category_of("not_a_real_sub") == frozenset()


def test_no_match_scores_participation_only():
    post = ReferencePost(subreddit="gaming", title="abc")
    total, breakdown = score(_prediction("cooking", "xyz"), post)

    assert total == 10
    assert breakdown.subreddit_points == 0
    assert breakdown.title_points == 0
    assert breakdown.subreddit_match == "none"
    assert breakdown.title_match == "none"


def test_partial_subreddit_is_flat(top_post):
    """'meme' is contained in 'memes' (0.7) but shares no category with it."""
    _, breakdown = score(_prediction("meme", "xyz"), top_post)

    assert breakdown.subreddit_points == 10
    assert breakdown.subreddit_match == "partial"


def test_partial_title_scales_with_similarity():
    # Containment: round(20 * 0.7) = 14
    post = ReferencePost(subreddit="pics", title="funny cat video")
    _, breakdown = score(_prediction("aww", "funny cat"), post)
    assert breakdown.title_points == 14
    assert breakdown.title_match == "partial"

    # Dice: 9 shared bigrams of 9 + 10 -> 18/19, round(20 * 0.947) = 19
    post = ReferencePost(subreddit="pics", title="the cat sag")
    _, breakdown = score(_prediction("aww", "the cat sat"), post)
    assert breakdown.title_points == 19


def test_title_below_threshold_scores_zero():
    post = ReferencePost(subreddit="pics", title="france")
    _, breakdown = score(_prediction("pics", "french"), post)  # Dice 0.4
    assert breakdown.title_points == 0


def test_streak_bonus():
    """score_so_far 110 with 1.3x -> round(33.0) bonus, total 143."""
    post = ReferencePost(subreddit="memes", title="abc")
    total, breakdown = score(_prediction("memes", "xyz"), post, streak_multiplier=1.3)

    assert breakdown.participation + breakdown.subreddit_points + breakdown.title_points == 110
    assert breakdown.streak_bonus == 33
    assert total == 143


def test_streak_bonus_rounds_half_up():
    post = ReferencePost(subreddit="gaming", title="abc")
    total, breakdown = score(_prediction("cooking", "xyz"), post, streak_multiplier=1.25)

    assert breakdown.streak_bonus == 3  # 2.5 rounds up
    assert total == 13


def test_no_bonus_at_multiplier_one(top_post):
    _, breakdown = score(_prediction("memes", "funny cat"), top_post, streak_multiplier=1.0)
    assert breakdown.streak_bonus == 0


def test_empty_fields_score_participation(top_post):
    total, _ = score(_prediction("", ""), top_post)
    assert total == 10


def test_score_is_idempotent(top_post):
    prediction = _prediction("dankmemes", "funny cats")
    first = score(prediction, top_post, streak_multiplier=1.2)
    second = score(prediction, top_post, streak_multiplier=1.2)
    assert first == second


def test_missing_reference_post_raises():
    with pytest.raises(ValueError):
        score(_prediction("memes", "xyz"), None)


def test_multiplier_below_one_raises(top_post):
    with pytest.raises(ValueError):
        score(_prediction("memes", "xyz"), top_post, streak_multiplier=0.9)


def test_blank_fields_never_match_blank_post():
    """A post missing subreddit/title must not hand out exact points for blanks."""
    post = ReferencePost.from_api({"subreddit": None, "title": None})
    total, breakdown = score(
        Prediction(user="tester", subreddit="", title="   "), post
    )

    assert total == 10
    assert breakdown.subreddit_match == "none"
    assert breakdown.title_match == "none"


@pytest.mark.parametrize("multiplier", [float("nan"), float("inf"), float("-inf")])
def test_non_finite_multiplier_raises(top_post, multiplier):
    with pytest.raises(ValueError):
        score(_prediction("memes", "xyz"), top_post, streak_multiplier=multiplier)
