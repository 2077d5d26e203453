"""Notifications are not stored; they are re-derived from application status on every read."""

from placement_portal.models.enums import ApplicationStatus


def build_notifications(applications) -> list[dict]:
    notifications = []
    for app in applications:
        status = ApplicationStatus(app.status)
        if status is ApplicationStatus.APPLIED:
            continue
        title = app.job.title if app.job is not None else "a position"
        when = app.updated_at or app.created_at
        notifications.append(
            {
                "id": app.id,
                "title": "Application Update",
                "message": f"Your application for {title} has been {status.value.lower()}",
                "type": "error" if status is ApplicationStatus.REJECTED else "success",
                "date": when.isoformat() if when else None,
            }
        )
    return notifications
