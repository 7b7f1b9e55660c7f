from typing import Iterable, List
from journey.schemas.activity import ActivityGroup, ActivityOut


def group_activities(activities: Iterable) -> List[ActivityGroup]:
    """
    Buckets activities by their exact ``occurs_at`` value.

    Two activities on the same calendar day but at different instants land
    in different groups. Groups come out in the order their timestamp is
    first seen and each group keeps the input order of its activities.
    """
    grouped: dict = {}
    for activity in activities:
        grouped.setdefault(activity.occurs_at, []).append(
            ActivityOut.model_validate(activity)
        )

    return [
        ActivityGroup(date=occurs_at, activities=items)
        for occurs_at, items in grouped.items()
    ]
