# app/db/models/__init__.py
from .user import User
from .project import Project, ProjectStatus
from .resource_type import ResourceType, ResourceCategory
from .backlog import Epic, Feature, UserStory, Task
from .template import FeatureTemplate, TemplateTask
