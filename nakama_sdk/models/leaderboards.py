"""Pydantic models for leaderboard and tournament records."""

from datetime import datetime

from pydantic import BaseModel, Field

from nakama_sdk.models.enums import Operator


class LeaderboardRecord(BaseModel):
    """A single score entry.

    Score fields are int64 on the server and arrive as JSON strings;
    pydantic coerces them back to int.
    """

    leaderboard_id: str
    owner_id: str
    username: str | None = None
    score: int = 0
    subscore: int = 0
    num_score: int = 0
    metadata: str | None = None
    create_time: datetime | None = None
    update_time: datetime | None = None
    expiry_time: datetime | None = None
    rank: int = 0
    max_num_score: int = 0


class LeaderboardRecordList(BaseModel):
    records: list[LeaderboardRecord] = Field(default_factory=list)
    owner_records: list[LeaderboardRecord] = Field(default_factory=list)
    next_cursor: str | None = None
    prev_cursor: str | None = None


class Tournament(BaseModel):
    id: str
    title: str | None = None
    description: str | None = None
    category: int = 0
    sort_order: int = 0
    size: int = 0
    max_size: int = 0
    max_num_score: int = 0
    can_enter: bool = False
    end_active: int = 0
    next_reset: int = 0
    metadata: str | None = None
    create_time: datetime | None = None
    start_time: datetime | None = None
    end_time: datetime | None = None
    duration: int = 0
    start_active: int = 0
    prev_reset: int = 0
    operator: Operator = Operator.NO_OVERRIDE
    authoritative: bool = False


class TournamentList(BaseModel):
    tournaments: list[Tournament] = Field(default_factory=list)
    cursor: str | None = None


class TournamentRecordList(BaseModel):
    records: list[LeaderboardRecord] = Field(default_factory=list)
    owner_records: list[LeaderboardRecord] = Field(default_factory=list)
    next_cursor: str | None = None
    prev_cursor: str | None = None
    rank_count: int = 0
