# app/db/models/backlog/__init__.py
from .epic import Epic
from .feature import Feature
from .user_story import UserStory
from .task import Task
