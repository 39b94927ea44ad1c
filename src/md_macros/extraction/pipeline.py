"""Extraction pipeline running every scanner over one document."""

from __future__ import annotations

from collections.abc import Iterable

from md_macros.config.logging import ensure_logging, get_logger
from md_macros.config.settings import Settings, get_settings
from md_macros.core.models import ParsedImage, ParsedLink, ParsedMacros
from md_macros.extraction.extractors import (
    CustomMacroExtractor,
    InlineLinkExtractor,
    ReferenceDefinitionExtractor,
    ReferenceStyleExtractor,
    SelfReferenceExtractor,
    TagExtractor,
)
from md_macros.parsing.boundaries import resolve_boundaries

logger = get_logger(__name__)


class ExtractionPipeline:
    """Runs the boundary walk, then each scanner in a fixed order.

    Reference definitions are collected before the reference-style and
    self-reference passes so both can resolve keys defined anywhere in the
    document. Each :meth:`parse` call builds fresh scanners; the pipeline
    itself holds only settings.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings or get_settings()
        ensure_logging(self._settings)

    def parse(self, md: str) -> ParsedMacros:
        boundaries = resolve_boundaries(md)
        images: list[ParsedImage] = []
        links: list[ParsedLink] = []

        custom_extractor = CustomMacroExtractor()
        inline_extractor = InlineLinkExtractor()
        reference_extractor = ReferenceDefinitionExtractor(boundaries)

        custom = custom_extractor.extract(md)
        self._split(inline_extractor.scan(md), images, links)
        references = reference_extractor.collect(md)

        reference_style_extractor = ReferenceStyleExtractor(
            references,
            collapsed_uses_text=self._settings.collapsed_reference_uses_text,
        )
        self_reference_extractor = SelfReferenceExtractor(
            references,
            boundaries,
            policy=self._settings.self_reference_boundary_policy,
        )
        tag_extractor = TagExtractor(boundaries)

        self._split(reference_style_extractor.scan(md), images, links)
        self._split(self_reference_extractor.scan(md), images, links)
        tags = tag_extractor.extract(md)

        logger.debug(
            "pipeline.parsed",
            passes=[
                extractor.name
                for extractor in (
                    custom_extractor,
                    inline_extractor,
                    reference_extractor,
                    reference_style_extractor,
                    self_reference_extractor,
                    tag_extractor,
                )
            ],
            custom=len(custom),
            images=len(images),
            links=len(links),
            references=len(references),
            tags=len(tags),
        )
        return ParsedMacros(
            custom=custom,
            img=images,
            links=links,
            references=references,
            tags=tags,
            code_blocks=boundaries.code_blocks.as_list(),
            quotes=boundaries.quotes.as_list(),
        )

    @staticmethod
    def _split(
        entities: Iterable[ParsedImage | ParsedLink],
        images: list[ParsedImage],
        links: list[ParsedLink],
    ) -> None:
        for entity in entities:
            if isinstance(entity, ParsedImage):
                images.append(entity)
            else:
                links.append(entity)


def parse_macros_from_md(md: str, settings: Settings | None = None) -> ParsedMacros:
    """Extract every macro, image, link, reference and tag from *md*.

    Raises :class:`~md_macros.core.exceptions.MalformedTitleError` or
    :class:`~md_macros.core.exceptions.DuplicateReferenceKeyError` on
    malformed input.
    """
    return ExtractionPipeline(settings).parse(md)
