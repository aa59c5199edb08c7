from dataclasses import dataclass


@dataclass(slots=True)
class Ability:
    """Represents a usable ability.

    Fields:
      name: Display / reference name; its slug keys the ability's cooldown.
      cooldown: Wall-clock seconds before the ability can be re-used (0 disables).
    """
    name: str
    cooldown: float = 0.0

    @property
    def slug(self) -> str:
        return self.name.replace(" ", "_").lower()
