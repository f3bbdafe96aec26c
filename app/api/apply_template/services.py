"""Expand a feature template into a new user story with one task per template task."""
import logging
from typing import Optional, Sequence, Union

from sqlalchemy.orm import Session, selectinload

from app.api.ownership import owned_feature
from app.api.resource_types.services import get_catalog
from app.api.templates.services import get_template
from app.core.exceptions import InvalidInput
from app.db.models.backlog import Feature, UserStory, Task
from app.db.models.resource_type import ResourceType
from app.db.ordering import lock_parent, next_order
from .schemas import Complexity

logger = logging.getLogger(__name__)

# Template task column holding the effort for each tier
HOURS_FIELD = {
    Complexity.SMALL: "hours_small",
    Complexity.MEDIUM: "hours_medium",
    Complexity.LARGE: "hours_large",
    Complexity.EXTRA_LARGE: "hours_extra_large",
}


def parse_complexity(value: Union[str, Complexity, None]) -> Complexity:
    try:
        return Complexity(value)
    except ValueError:
        allowed = "|".join(c.value for c in Complexity)
        raise InvalidInput(f"complexity must be one of {allowed}")


def story_name(template_name: str, complexity: Complexity) -> str:
    return f"{template_name} \u2014 {complexity.value}"


def resolve_resource_type(name: str, catalog: Sequence[ResourceType]) -> Optional[ResourceType]:
    """Match ``name`` against the catalog ignoring case.

    With no match the first catalog entry is used; an empty catalog gives None.
    """
    wanted = name.lower()
    for resource_type in catalog:
        if resource_type.name.lower() == wanted:
            return resource_type
    return catalog[0] if catalog else None


def apply_template(db: Session, feature_id: int, template_id: int,
                   complexity: Union[str, Complexity, None], user_id: int) -> UserStory:
    tier = parse_complexity(complexity)
    feature = owned_feature(db, feature_id, user_id)
    template = get_template(db, template_id)
    project_id = feature.epic.project_id
    catalog = get_catalog(db, project_id)
    hours_field = HOURS_FIELD[tier]
    template_tasks = list(template.tasks)

    # Story and tasks land together or not at all
    try:
        lock_parent(db, Feature, feature_id)
        story = UserStory(
            name=story_name(template.name, tier),
            feature_id=feature_id,
            order=next_order(db, UserStory.feature_id, feature_id),
        )
        db.add(story)
        db.flush()
        story_id = story.id

        created = 0
        for index, template_task in enumerate(template_tasks):
            resource_type = resolve_resource_type(template_task.resource_type_name, catalog)
            if resource_type is None:
                logger.warning(
                    "Skipping template task %s: project %s has no resource types",
                    template_task.id, project_id)
                continue
            if resource_type.name.lower() != template_task.resource_type_name.lower():
                logger.warning(
                    "No resource type named %r in project %s, using %r",
                    template_task.resource_type_name, project_id, resource_type.name)

            db.add(Task(
                name=template_task.name,
                hours_effort=getattr(template_task, hours_field),
                resource_type_id=resource_type.id,
                user_story_id=story_id,
                order=index,
            ))
            created += 1

        db.commit()
    except Exception:
        db.rollback()
        raise

    logger.info(
        "Applied template %s (%s) to feature %s: story %s with %d of %d tasks",
        template_id, tier.value, feature_id, story_id, created, len(template_tasks))

    return db.query(UserStory).options(
        selectinload(UserStory.tasks).selectinload(Task.resource_type)
    ).filter(UserStory.id == story_id).one()
