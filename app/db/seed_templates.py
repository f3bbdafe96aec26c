import logging

from sqlalchemy.orm import Session
from app.db.models.template import FeatureTemplate, TemplateTask

logger = logging.getLogger(__name__)

# (name, small, medium, large, extra large, resource type name)
STARTER_TEMPLATES = {
    ("Auth Feature", "Security", "Sign-up, login and session handling"): [
        ("Backend Auth", 4, 8, 16, 24, "Developer"),
        ("Login UI", 4, 6, 12, 20, "Developer"),
        ("Auth Test Pass", 2, 4, 8, 12, "QA Engineer"),
        ("Security Review", 1, 2, 4, 8, "Tech Governance"),
    ],
    ("CRUD Screen", "UI", "List, create, edit and delete one entity"): [
        ("Requirements", 1, 2, 4, 6, "Business Analyst"),
        ("API Endpoints", 4, 8, 12, 20, "Developer"),
        ("Screens", 6, 10, 16, 24, "Developer"),
        ("Regression Tests", 2, 4, 6, 10, "QA Engineer"),
    ],
    ("Reporting Dashboard", "Analytics", "Aggregated charts over existing data"): [
        ("Metric Definitions", 2, 4, 6, 10, "Business Analyst"),
        ("Data Queries", 4, 8, 16, 32, "Developer"),
        ("Chart Components", 4, 8, 12, 20, "Developer"),
        ("Design Review", 1, 2, 3, 4, "Tech Lead"),
        ("Stakeholder Sign-off", 1, 1, 2, 4, "Project Manager"),
    ],
}


def seed_templates(db: Session) -> int:
    """Add the starter templates that aren't in the library yet. Returns how many were added."""
    existing = {name for (name,) in db.query(FeatureTemplate.name).all()}
    added = 0

    for (name, category, description), tasks in STARTER_TEMPLATES.items():
        if name in existing:
            continue
        template = FeatureTemplate(name=name, category=category, description=description)
        template.tasks = [
            TemplateTask(
                name=task_name,
                hours_small=small,
                hours_medium=medium,
                hours_large=large,
                hours_extra_large=extra_large,
                resource_type_name=resource_type_name,
            )
            for task_name, small, medium, large, extra_large, resource_type_name in tasks
        ]
        db.add(template)
        added += 1

    db.commit()
    logger.info("Seeded %d template(s)", added)
    return added

if __name__ == "__main__":
    from app.db.session import SessionLocal

    logging.basicConfig(level=logging.INFO)
    db = SessionLocal()
    try:
        seed_templates(db)
    finally:
        db.close()
