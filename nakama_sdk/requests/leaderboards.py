"""Leaderboard record requests."""

from typing import Annotated, Any, Self

from nakama_sdk.models.enums import Operator
from nakama_sdk.models.leaderboards import LeaderboardRecord, LeaderboardRecordList
from nakama_sdk.requests._base import PageRequest, PathId, Query, Request


class LeaderboardRecordsRequest(PageRequest):
    """List records of a leaderboard, optionally including given owners."""

    path = "v2/leaderboard/{leaderboard_id}"
    response_type = LeaderboardRecordList

    leaderboard_id: PathId
    owner_ids: Annotated[list[str] | None, Query("ownerIds")] = None
    expiry: Annotated[int | None, Query()] = None

    def __init__(self, leaderboard_id: str, **data: Any) -> None:
        super().__init__(leaderboard_id=leaderboard_id, **data)

    def with_owner_ids(self, *owner_ids: str) -> Self:
        self.owner_ids = list(owner_ids)
        return self

    def with_expiry(self, expiry: int) -> Self:
        """Expiry as a unix timestamp; 0 selects the current period."""
        self.expiry = expiry
        return self


class WriteLeaderboardRecordRequest(Request):
    """Submit a score for the current user."""

    method = "POST"
    path = "v2/leaderboard/{leaderboard_id}"
    response_type = LeaderboardRecord
    sends_body = True

    leaderboard_id: PathId
    score: int | None = None
    subscore: int | None = None
    metadata: str | None = None
    operator: Operator | None = None

    def __init__(self, leaderboard_id: str, **data: Any) -> None:
        super().__init__(leaderboard_id=leaderboard_id, **data)

    def with_score(self, score: int) -> Self:
        self.score = score
        return self

    def with_subscore(self, subscore: int) -> Self:
        self.subscore = subscore
        return self

    def with_metadata(self, metadata: str) -> Self:
        self.metadata = metadata
        return self

    def with_operator(self, operator: Operator) -> Self:
        self.operator = operator
        return self


class DeleteLeaderboardRecordRequest(Request):
    method = "DELETE"
    path = "v2/leaderboard/{leaderboard_id}"

    leaderboard_id: PathId

    def __init__(self, leaderboard_id: str, **data: Any) -> None:
        super().__init__(leaderboard_id=leaderboard_id, **data)


class LeaderboardRecordsAroundOwnerRequest(PageRequest):
    """List records centred on a given owner."""

    path = "v2/leaderboard/{leaderboard_id}/owner/{owner_id}"
    response_type = LeaderboardRecordList

    leaderboard_id: PathId
    owner_id: PathId
    expiry: Annotated[int | None, Query()] = None

    def __init__(self, leaderboard_id: str, owner_id: str, **data: Any) -> None:
        super().__init__(leaderboard_id=leaderboard_id, owner_id=owner_id, **data)

    def with_expiry(self, expiry: int) -> Self:
        self.expiry = expiry
        return self
