from __future__ import annotations

from typing import Callable

from esper import World

from cooldownlib.components.ability import Ability
from cooldownlib.constants import DEFAULT_ABILITY_NAMESPACE
from cooldownlib.cooldown import Cooldown
from cooldownlib.events.bus import (
    EventBus,
    EVENT_ABILITY_ACTIVATE_REQUEST,
    EVENT_ABILITY_ACTIVATED,
    EVENT_ABILITY_EXECUTE,
    EVENT_ABILITY_ON_COOLDOWN,
)
from cooldownlib.keys import NamespacedKey
from cooldownlib.persistence.entity import EntityDataHolder


class AbilityCooldownSystem:
    """Starts wall-clock cooldowns on use and gates activation requests.

    Cooldown records live on the ability entity itself, keyed by
    ``<namespace>:<ability slug>``.
    """

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        *,
        clock: Callable[[], float] | None = None,
        namespace: str = DEFAULT_ABILITY_NAMESPACE,
    ) -> None:
        self.world = world
        self.event_bus = event_bus
        self.clock = clock
        self.namespace = namespace
        event_bus.subscribe(EVENT_ABILITY_EXECUTE, self.on_ability_execute)
        event_bus.subscribe(EVENT_ABILITY_ACTIVATE_REQUEST, self.on_activate_request)

    def cooldown_for(self, ability_entity: int) -> Cooldown | None:
        ability = self._get_ability(ability_entity)
        if ability is None:
            return None
        return Cooldown(NamespacedKey(self.namespace, ability.slug), clock=self.clock)

    def on_ability_execute(self, sender, **payload) -> None:
        ability_entity = payload.get("ability_entity")
        if ability_entity is None:
            return
        ability = self._get_ability(ability_entity)
        if ability is None or ability.cooldown <= 0:
            return
        cooldown = self.cooldown_for(ability_entity)
        cooldown.set(EntityDataHolder(self.world, ability_entity), ability.cooldown)

    def on_activate_request(self, sender, **payload) -> None:
        ability_entity = payload.get("ability_entity")
        if ability_entity is None:
            return
        cooldown = self.cooldown_for(ability_entity)
        if cooldown is None:
            return
        holder = EntityDataHolder(self.world, ability_entity)
        owner_entity = payload.get("owner_entity")
        cooldown.remove_if_expired(holder)
        if cooldown.is_expired(holder):
            self.event_bus.emit(
                EVENT_ABILITY_ACTIVATED,
                ability_entity=ability_entity,
                owner_entity=owner_entity,
            )
            return
        self.event_bus.emit(
            EVENT_ABILITY_ON_COOLDOWN,
            ability_entity=ability_entity,
            owner_entity=owner_entity,
            remaining=cooldown.remaining_time(holder),
        )

    def _get_ability(self, ability_entity: int) -> Ability | None:
        try:
            return self.world.component_for_entity(ability_entity, Ability)
        except KeyError:
            return None
