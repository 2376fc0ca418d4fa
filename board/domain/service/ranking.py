"""Comment ranking.

Rank combines a comment's score with the absolute time it was posted:

    rank = -floor((log10(max(score + 1, 1)) + days_since_epoch) * 10**7) / 10**7

Lower ranks are displayed first, so sorting ascending gives best-first
order. Each tenfold increase in score is worth as much as one day of
recency. The age term is measured from the Unix epoch rather than from
"now", so it shifts every comment by the same amount over time and only
the differences within one sibling group matter.
"""

import math
from datetime import datetime, timedelta, timezone

from board.domain.error import FieldNotFetchedError
from board.domain.model.comment import Comment

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
MS_PER_DAY = 86_400_000

# Ranks are truncated to this many decimal places to get stable tie-breaks
RANK_PRECISION = 10**7


def comment_rank(comment: Comment) -> float:
    """Compute the sort key of a comment within its sibling group.

    Args:
        comment: Comment fetched with its score

    Returns:
        Rank value; lower is better

    Raises:
        FieldNotFetchedError: If the comment was fetched without its score
    """
    if comment.score is None:
        raise FieldNotFetchedError("Comment", "score")

    popularity = math.log10(max(comment.score + 1, 1))
    # Age counts whole milliseconds since the epoch
    epoch_ms = (comment.commented_at - EPOCH) // timedelta(milliseconds=1)
    age_in_days = epoch_ms / MS_PER_DAY

    return -math.floor((popularity + age_in_days) * RANK_PRECISION) / RANK_PRECISION
