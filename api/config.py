from functools import lru_cache
from typing import List, Literal, Optional

from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

load_dotenv()

DEFAULT_CANDIDATE_MODELS = [
    "mistralai/Mistral-7B-Instruct-v0.3",
    "microsoft/DialoGPT-medium",
    "google/flan-t5-large",
    "facebook/blenderbot-400M-distill",
    "bigscience/bloom-560m",
]

Base = declarative_base()


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    huggingface_api_key: Optional[str] = None
    # Comma separated; `ollama:<name>` entries use the local Ollama daemon.
    candidate_models: str = ",".join(DEFAULT_CANDIDATE_MODELS)
    min_plan_chars: int = 100
    inference_timeout: Optional[float] = None
    ollama_base_url: str = "http://localhost:11434"

    plan_store: Literal["sql", "firestore"] = "sql"
    database_url: str = "sqlite:///./study_plans.db"
    firebase_key_path: Optional[str] = None
    firestore_collection: str = "studyPlans"

    host: str = "0.0.0.0"
    port: int = 3001
    log_level: str = "INFO"
    log_dir: str = "logs"

    @property
    def candidate_model_ids(self) -> List[str]:
        return [m.strip() for m in self.candidate_models.split(",") if m.strip()]


@lru_cache
def get_settings() -> Settings:
    return Settings()


def create_db_engine(database_url: str) -> Engine:
    if database_url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        if ":memory:" in database_url:
            # A single shared connection, otherwise each session sees an empty database.
            kwargs["poolclass"] = StaticPool
        return create_engine(database_url, **kwargs)
    return create_engine(database_url, pool_pre_ping=True)


def create_db(engine: Engine) -> None:
    Base.metadata.create_all(bind=engine)


def make_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)
