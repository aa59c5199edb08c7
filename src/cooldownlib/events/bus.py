from blinker import Signal
from typing import Dict

# ============================================================================
# ABILITIES
# ============================================================================
EVENT_ABILITY_ACTIVATE_REQUEST = "ability_activate_request"  # payload: ability_entity=int, owner_entity=int
EVENT_ABILITY_ACTIVATED = "ability_activated"                # payload: ability_entity=int, owner_entity=int
EVENT_ABILITY_ON_COOLDOWN = "ability_on_cooldown"            # payload: ability_entity=int, owner_entity=int, remaining=timedelta
EVENT_ABILITY_EXECUTE = "ability_execute"                    # payload: ability_entity=int, owner_entity=int


class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # weak=False keeps bound methods of systems nobody else references alive.
        sig.connect(fn, weak=False)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)
