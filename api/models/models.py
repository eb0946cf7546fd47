from api.config import Base
from sqlalchemy import Column, String, DateTime, Text, Boolean
from api.utils.common import utc_now


class StudyPlan(Base):
    __tablename__ = "study_plans"
    id = Column(String, primary_key=True, index=True)  # uuid
    subject = Column(String, nullable=False)
    level = Column(String, nullable=False)
    duration = Column(String, nullable=False)
    goals = Column(Text, nullable=False)
    plan = Column(Text, nullable=False)
    model_used = Column(String, nullable=False)  # "fallback" or a model id
    is_ai_generated = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime, default=utc_now, nullable=False, index=True)
