"""Shared feature-template library.

Templates belong to no project. Anyone may read them; any authenticated
user may change them (the routes enforce authentication, nothing here
checks ownership).
"""
from sqlalchemy.orm import Session, selectinload

from app.core.exceptions import NotFound
from app.db.models.template import FeatureTemplate, TemplateTask
from . import schemas


def get_templates(db: Session):
    return db.query(FeatureTemplate).options(
        selectinload(FeatureTemplate.tasks)
    ).order_by(FeatureTemplate.name, FeatureTemplate.id).all()

def get_template(db: Session, template_id: int) -> FeatureTemplate:
    template = db.query(FeatureTemplate).filter(FeatureTemplate.id == template_id).first()
    if not template:
        raise NotFound("Template not found")
    return template

def create_template(db: Session, template: schemas.TemplateCreate):
    db_template = FeatureTemplate(**template.model_dump())
    db.add(db_template)
    db.commit()
    db.refresh(db_template)
    return db_template

def update_template(db: Session, template_id: int, template: schemas.TemplateUpdate):
    db_template = get_template(db, template_id)
    for key, value in template.changes().items():
        setattr(db_template, key, value)
    db.commit()
    db.refresh(db_template)
    return db_template

def delete_template(db: Session, template_id: int):
    db_template = get_template(db, template_id)
    db.delete(db_template)
    db.commit()


def get_template_task(db: Session, template_id: int, task_id: int) -> TemplateTask:
    task = db.query(TemplateTask).filter(
        TemplateTask.id == task_id,
        TemplateTask.template_id == template_id
    ).first()
    if not task:
        raise NotFound("Template task not found")
    return task

def create_template_task(db: Session, template_id: int, task: schemas.TemplateTaskCreate):
    get_template(db, template_id)
    db_task = TemplateTask(**task.model_dump(), template_id=template_id)
    db.add(db_task)
    db.commit()
    db.refresh(db_task)
    return db_task

def update_template_task(db: Session, template_id: int, task_id: int, task: schemas.TemplateTaskUpdate):
    db_task = get_template_task(db, template_id, task_id)
    for key, value in task.changes().items():
        setattr(db_task, key, value)
    db.commit()
    db.refresh(db_task)
    return db_task

def delete_template_task(db: Session, template_id: int, task_id: int):
    db_task = get_template_task(db, template_id, task_id)
    db.delete(db_task)
    db.commit()
