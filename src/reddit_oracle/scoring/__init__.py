"""
Prediction scoring.

- similarity: bigram Dice coefficient with a containment shortcut
- calculator: point table, category matching, and streak bonus

Usage example
-------------
    from reddit_oracle.scoring.calculator import score

    total, breakdown = score(prediction, reference_post, streak_multiplier=1.2)
"""
