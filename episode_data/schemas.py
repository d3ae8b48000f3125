import datetime as dt
from typing import Optional, List, Dict, Any
from pydantic import BaseModel, Field
from enum import Enum

# Zero-based column index sentinel for headers that were not found
ABSENT = -1

class EpisodeType(str, Enum):
    MAIN = "main"
    FRIDAY = "friday"

# Sheet Schemas
class ColumnMap(BaseModel):
    category: int = ABSENT
    title: int = ABSENT
    topic: int = ABSENT
    demand: int = ABSENT
    supply: int = ABSENT
    voice: int = ABSENT
    host: int = ABSENT
    main: int = ABSENT
    bonus: int = ABSENT
    bonus_name: int = ABSENT
    date: int = ABSENT
    status: int = ABSENT

    def has(self, field: str) -> bool:
        return getattr(self, field) != ABSENT

    def cell(self, row: List[Any], field: str) -> str:
        """Value of a logical field in a raw row, "" when absent or ragged"""
        index = getattr(self, field)
        if index == ABSENT or index >= len(row) or row[index] is None:
            return ""
        return str(row[index])

class Episode(BaseModel):
    id: int = 0
    category: str = ""
    title: str = ""
    topic: str = ""
    demand: str = ""
    supply: str = ""
    voice: str = ""
    host: str = ""
    main_day: str = ""
    bonus_day: str = ""
    bonus_name: str = ""
    date: Optional[dt.date] = None
    status: str = ""
    processed: bool = False
    row_index: int = 0  # 1-based sheet row, header is row 1

class EpisodeSheet(BaseModel):
    headers: List[str]
    column_map: ColumnMap
    episodes: List[Episode]
    total_episodes: int

# Script Schemas
class GenerationRequest(BaseModel):
    episode_type: EpisodeType
    system_prompt: str
    user_prompt: str
    max_tokens: int
    temperature: float = 0.7
    top_p: float = 0.9

class ScriptSection(BaseModel):
    name: str
    content: str
    word_count: int

class GeneratedScript(BaseModel):
    episode_type: EpisodeType
    sections: List[ScriptSection] = []
    total_words: int = 0
    full_text: str
    degraded: bool = False  # no recognised section headings
    generated_at: dt.datetime = Field(default_factory=dt.datetime.now)

class SEOContent(BaseModel):
    title: Optional[str] = None
    tags: List[str] = []

class GeneratedContent(BaseModel):
    episode_ref: str
    topic: str
    episode_type: EpisodeType
    episode: Optional[Episode] = None
    script: GeneratedScript
    seo: Optional[SEOContent] = None
    description: Optional[str] = None
    source: str = "api"  # api, sheet, scheduler
    status: str = "generated"
    generated_at: dt.datetime = Field(default_factory=dt.datetime.now)

# Batch Schemas
class ScriptRequest(BaseModel):
    topic: str
    episode_type: EpisodeType

class BatchItemError(BaseModel):
    topic: Optional[str]
    error: str

class BatchResult(BaseModel):
    total_requested: int
    successful: int
    failed: int
    results: List[GeneratedContent] = []
    errors: Optional[List[BatchItemError]] = None

# Scheduler Schemas
class EpisodeOutcome(BaseModel):
    episode_id: int
    topic: str
    success: bool
    episode_type: Optional[EpisodeType] = None
    total_words: int = 0
    status_updated: bool = False
    error: Optional[str] = None

class RunSummary(BaseModel):
    started_at: dt.datetime
    finished_at: Optional[dt.datetime] = None
    total_episodes: int = 0
    candidates: int = 0
    successful: int = 0
    failed: int = 0
    outcomes: List[EpisodeOutcome] = []

# Agent Event Schemas
class AgentEventCreate(BaseModel):
    agent_name: str
    event_type: str
    topic: Optional[str] = None
    payload: Optional[Dict[str, Any]] = None
    message: Optional[str] = None

