# app/db/models/template/__init__.py
from .feature_template import FeatureTemplate
from .template_task import TemplateTask
