"""Persistence layer for notification routing rules."""

from __future__ import annotations

from collections.abc import Sequence
from uuid import uuid4

from sqlalchemy import desc, func
from sqlalchemy.orm import Session

from hr_notifications.domain.entities import Route, RoutingRule
from hr_notifications.domain.entities.notification import normalize_notification_type
from hr_notifications.infrastructure.models import RouteModel, RoutingRuleModel
from hr_notifications.utils import ensure_app_naive_datetime, ensure_app_timezone


class RoutingRuleRepository:
    """Provide read access to rules and their routes, plus rule registration."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_active_by_trigger(self, trigger: str) -> Sequence[RoutingRule]:
        """Return active rules for ``trigger`` newest first, routes in stored order."""

        normalized = normalize_notification_type(trigger)
        query = (
            self.session.query(RoutingRuleModel)
            .filter(func.upper(RoutingRuleModel.trigger) == normalized)
            .filter(RoutingRuleModel.is_active.is_(True))
            .order_by(desc(RoutingRuleModel.created_at), desc(RoutingRuleModel.id))
        )
        return [self._to_entity(model) for model in query.all()]

    def list(self, *, trigger: str | None = None) -> Sequence[RoutingRule]:
        query = self.session.query(RoutingRuleModel)
        if trigger:
            query = query.filter(
                func.upper(RoutingRuleModel.trigger)
                == normalize_notification_type(trigger)
            )
        query = query.order_by(desc(RoutingRuleModel.created_at), desc(RoutingRuleModel.id))
        return [self._to_entity(model) for model in query.all()]

    def get(self, rule_id: str) -> RoutingRule | None:
        model = self.session.get(RoutingRuleModel, rule_id)
        return self._to_entity(model) if model else None

    def create(self, rule: RoutingRule) -> RoutingRule:
        model = RoutingRuleModel(id=rule.id or str(uuid4()))
        model.name = rule.name
        model.trigger = normalize_notification_type(rule.trigger)
        model.is_active = rule.is_active
        model.conditions = rule.conditions
        if rule.created_at is not None:
            model.created_at = ensure_app_naive_datetime(rule.created_at)
        for position, route in enumerate(rule.routes):
            model.routes.append(
                RouteModel(
                    id=route.id or str(uuid4()),
                    recipient=route.recipient_id,
                    conditions=route.conditions,
                    position=position,
                )
            )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: RoutingRuleModel) -> RoutingRule:
        return RoutingRule(
            id=model.id,
            name=model.name,
            trigger=model.trigger,
            is_active=model.is_active,
            conditions=model.conditions or None,
            created_at=ensure_app_timezone(model.created_at),
            routes=[
                Route(
                    id=route.id,
                    rule_id=route.rule_id,
                    recipient_id=route.recipient,
                    conditions=route.conditions or None,
                    position=route.position,
                )
                for route in model.routes
            ],
        )


__all__ = ["RoutingRuleRepository"]
