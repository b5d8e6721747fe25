from collections.abc import Mapping
from typing import Any

from TBR.errors import ConfigurationError
from TBR.settings import ResizeSettings


class ThumbnailFormatsConfig:
    """Named thumbnail formats grouped by media context

    Format ids are "{context}_{format_name}", e.g. "news_small".
    """

    def __init__(self, contexts: dict[str, dict[str, ResizeSettings]]):
        for context in contexts:
            assert '_' not in context, f"Context name can't contain '_': {context}"
        self.contexts = contexts

    @classmethod
    def from_dict(cls, config: Mapping[str, Mapping[str, Mapping[str, Any]]]) -> 'ThumbnailFormatsConfig':
        """Builds config from a mapping

        Parameters
        ----------
        config: Mapping[str, Mapping[str, Mapping[str, Any]]]
            Mapping context -> format name -> resize settings, e.g.
            {"news": {"small": {"width": 100, "crop": True, "height": 100}}}

        Returns
        -------
        ThumbnailFormatsConfig
            Config with validated settings
        """
        contexts = {
            context: {
                name: ResizeSettings.from_dict(settings)
                for name, settings in formats.items()
            }
            for context, formats in config.items()
        }
        return cls(contexts)

    @staticmethod
    def format_id(context: str, format_name: str) -> str:
        return f'{context}_{format_name}'

    @staticmethod
    def split_format_id(format_id: str) -> tuple[str, str]:
        context, _, format_name = format_id.partition('_')
        return context, format_name

    def formats_for(self, context: str) -> dict[str, ResizeSettings]:
        """Settings of all formats of context, keyed by format id"""
        if context not in self.contexts:
            raise ConfigurationError(f'Unknown context "{context}"', context=context)
        return {
            self.format_id(context, name): settings
            for name, settings in self.contexts[context].items()
        }

    def get(self, format_id: str) -> ResizeSettings:
        context, format_name = self.split_format_id(format_id)
        formats = self.formats_for(context)
        if format_id not in formats:
            raise ConfigurationError(
                f'Unknown format "{format_name}" in context "{context}"', context=context
            )
        return formats[format_id]

    def __repr__(self) -> str:
        return f'ThumbnailFormatsConfig(contexts={list(self.contexts.keys())})'
