"""Tournament requests."""

from typing import Annotated, Any, Self

from nakama_sdk.models.enums import Operator
from nakama_sdk.models.leaderboards import LeaderboardRecord, TournamentList, TournamentRecordList
from nakama_sdk.requests._base import PageRequest, PathId, Query, Request


class TournamentsRequest(PageRequest):
    """List tournaments filtered by category range and time window.

    Times are unix timestamps in seconds.
    """

    path = "v2/tournament"
    response_type = TournamentList

    category_start: Annotated[int | None, Query("categoryStart")] = None
    category_end: Annotated[int | None, Query("categoryEnd")] = None
    start_time: Annotated[int | None, Query("startTime")] = None
    end_time: Annotated[int | None, Query("endTime")] = None

    def with_category_start(self, category_start: int) -> Self:
        self.category_start = category_start
        return self

    def with_category_end(self, category_end: int) -> Self:
        self.category_end = category_end
        return self

    def with_start_time(self, start_time: int) -> Self:
        self.start_time = start_time
        return self

    def with_end_time(self, end_time: int) -> Self:
        self.end_time = end_time
        return self


class TournamentRecordsRequest(PageRequest):
    path = "v2/tournament/{tournament_id}"
    response_type = TournamentRecordList

    tournament_id: PathId
    owner_ids: Annotated[list[str] | None, Query("ownerIds")] = None
    expiry: Annotated[int | None, Query()] = None

    def __init__(self, tournament_id: str, **data: Any) -> None:
        super().__init__(tournament_id=tournament_id, **data)

    def with_owner_ids(self, *owner_ids: str) -> Self:
        self.owner_ids = list(owner_ids)
        return self

    def with_expiry(self, expiry: int) -> Self:
        self.expiry = expiry
        return self


class WriteTournamentRecordRequest(Request):
    """Submit a score to a tournament the user has joined."""

    method = "POST"
    path = "v2/tournament/{tournament_id}"
    response_type = LeaderboardRecord
    sends_body = True

    tournament_id: PathId
    score: int | None = None
    subscore: int | None = None
    metadata: str | None = None
    operator: Operator | None = None

    def __init__(self, tournament_id: str, **data: Any) -> None:
        super().__init__(tournament_id=tournament_id, **data)

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


class JoinTournamentRequest(Request):
    method = "POST"
    path = "v2/tournament/{tournament_id}/join"

    tournament_id: PathId

    def __init__(self, tournament_id: str, **data: Any) -> None:
        super().__init__(tournament_id=tournament_id, **data)


class TournamentRecordsAroundOwnerRequest(PageRequest):
    path = "v2/tournament/{tournament_id}/owner/{owner_id}"
    response_type = TournamentRecordList

    tournament_id: PathId
    owner_id: PathId
    expiry: Annotated[int | None, Query()] = None

    def __init__(self, tournament_id: str, owner_id: str, **data: Any) -> None:
        super().__init__(tournament_id=tournament_id, owner_id=owner_id, **data)

    def with_expiry(self, expiry: int) -> Self:
        self.expiry = expiry
        return self
