"""Builder configuration.

Settings are passed explicitly to each TreeBuilder; nothing is read from the
environment or stored globally.
"""

from pydantic import BaseModel, ConfigDict, Field


class BuilderConfig(BaseModel):
    """Options controlling one tree construction pass.

    Params:
        max_depth: Maximum nesting depth of elements (top level is depth 1).
            None disables the limit.
        configure_instances: Whether configure_each actions also run on
            pre-built element instances handed to the builder.
        log_actions: Emit a DEBUG record for every applied action.
    """

    model_config = ConfigDict(frozen=True)

    max_depth: int | None = Field(default=None, ge=1)
    configure_instances: bool = True
    log_actions: bool = False


DEFAULT_CONFIG = BuilderConfig()
