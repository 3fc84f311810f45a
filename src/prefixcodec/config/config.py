"""Configuration module for decoder composition and logging."""

import sys
from pathlib import Path
from typing import Any, List, Optional

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..types import DuplicatePrefixPolicy
from . import default_config as defaults

# Handler ids added by configure_logging, removed again on reconfigure
_handler_ids: List[int] = []


class DispatchConfig(BaseModel):
    """Configuration for composing decoders."""

    model_config = ConfigDict(
        arbitrary_types_allowed=True,
        validate_default=True,
        str_strip_whitespace=True,
        validate_assignment=True
    )

    # Composition
    duplicate_prefix: DuplicatePrefixPolicy = Field(
        default=DuplicatePrefixPolicy(defaults.DUPLICATE_PREFIX_POLICY),
        description="What to do when two decoders share a prefix"
    )

    # Logging
    log_level: str = Field(
        default=defaults.LOG_LEVEL,
        description="Logging level"
    )
    log_file: Optional[Path] = Field(
        default=None,
        description="Log file path"
    )

    @field_validator("log_level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        value = value.upper()
        try:
            logger.level(value)
        except ValueError:
            raise ValueError(f"Unknown log level: {value}") from None
        return value

    def configure_logging(self) -> None:
        """Install loguru sinks for prefixcodec based on settings.

        Only sinks added by an earlier call are replaced; sinks owned by the
        host application are left alone. The new sinks only receive
        prefixcodec records.
        """
        reset_logging()
        logger.enable("prefixcodec")

        # Add console handler
        _handler_ids.append(logger.add(
            sink=sys.stderr,
            level=self.log_level,
            format=defaults.LOG_FORMAT,
            filter="prefixcodec"
        ))

        # Add file handler if specified
        if self.log_file:
            _handler_ids.append(logger.add(
                sink=str(self.log_file),
                level=self.log_level,
                filter="prefixcodec",
                rotation=defaults.LOG_ROTATION,
                retention=defaults.LOG_RETENTION
            ))

    def compose(self, *decoders: Any):
        """Compose decoders using the configured duplicate prefix policy.

        Later decoders win on a shared prefix under the replace policy.

        Args:
            *decoders: Decoders, composed decoders or codecs

        Returns:
            New ComposedDecoder

        Raises:
            ValueError: If no decoders are given
            DuplicatePrefixError: If a prefix collides under the reject policy
        """
        from ..decoder import ComposedDecoder

        if not decoders:
            raise ValueError("At least one decoder is required")
        composed = ComposedDecoder.from_decoder(decoders[0], policy=self.duplicate_prefix)
        for decoder in decoders[1:]:
            composed = composed.or_(decoder)
        return composed


def reset_logging() -> None:
    """Remove the sinks installed by configure_logging and silence prefixcodec."""
    while _handler_ids:
        logger.remove(_handler_ids.pop())
    logger.disable("prefixcodec")
