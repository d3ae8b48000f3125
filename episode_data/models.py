from sqlalchemy import Column, Integer, String, Text, DateTime, JSON
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func

Base = declarative_base()

class GeneratedScriptRecord(Base):
    __tablename__ = "generated_scripts"

    id = Column(Integer, primary_key=True, index=True)
    episode_ref = Column(String, nullable=False, index=True)  # sheet:row-12, api:<topic-slug>
    topic = Column(String, nullable=False)
    episode_type = Column(String, nullable=False)  # main, friday
    source = Column(String, default="api")  # api, sheet, scheduler
    sheet_row = Column(Integer)  # row_index of the originating sheet row
    total_words = Column(Integer, default=0)
    section_count = Column(Integer, default=0)
    sections = Column(JSON)  # [{name, word_count}]
    full_text = Column(Text, nullable=False)
    seo_title = Column(String)
    seo_tags = Column(JSON)
    description = Column(Text)
    status = Column(String, default="generated")
    created_at = Column(DateTime, default=func.now())

class AgentEvent(Base):
    __tablename__ = "agent_events"

    id = Column(Integer, primary_key=True, index=True)
    agent_name = Column(String, nullable=False)
    event_type = Column(String, nullable=False)  # script_generated, batch_completed, scheduler_run, etc.
    topic = Column(String)
    payload = Column(JSON)  # event-specific data
    message = Column(Text)
    created_at = Column(DateTime, default=func.now())
