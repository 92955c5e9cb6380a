"""Builds push messages for a scenario from event context."""

from order_push.notification.message import NotificationMessage, Scenario
from order_push.templates import get_template


def compose(scenario: Scenario, context: dict | None = None) -> NotificationMessage:
    template_cls = get_template(scenario)
    rendered = template_cls.render(context or {})
    return NotificationMessage(
        scenario=scenario,
        title=rendered["title"],
        body=rendered["body"],
        hints=template_cls.hints,
    )
