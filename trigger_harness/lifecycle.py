"""
Test session lifecycle.

init() records the project the harness pretends to run in; cleanup() undoes
everything a test may have changed process-wide.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from . import runtime_config
from .config import load_settings

logger = logging.getLogger("trigger_harness.lifecycle")


@dataclass(frozen=True)
class ProjectSettings:
    project_id: str
    database_url: str


_active: Optional[ProjectSettings] = None


def get_project_settings() -> Optional[ProjectSettings]:
    return _active


class HarnessSession:
    """
    Usage:
        with HarnessSession().init(project_id="my-project"):
            wrapped = wrap(on_write)
            ...
    """

    def __init__(self):
        self.settings: Optional[ProjectSettings] = None

    def init(
        self, project_id: Optional[str] = None, database_url: Optional[str] = None
    ) -> "HarnessSession":
        global _active
        config = load_settings()
        project_id = project_id or config.DEFAULT_PROJECT_ID
        if database_url is None:
            if project_id == config.DEFAULT_PROJECT_ID:
                database_url = config.DEFAULT_DATABASE_URL
            else:
                database_url = f"https://{project_id}.firebaseio.com"

        self.settings = ProjectSettings(project_id=project_id, database_url=database_url)
        _active = self.settings
        logger.info(f"Harness session initialized for project {project_id}")
        return self

    def cleanup(self) -> None:
        global _active
        runtime_config.clear_config()
        if _active is self.settings:
            _active = None
        self.settings = None

    def __enter__(self) -> "HarnessSession":
        if self.settings is None:
            self.init()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.cleanup()
        return False
