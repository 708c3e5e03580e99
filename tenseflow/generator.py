"""Random example generation over the lexical pools and a template set."""

from __future__ import annotations

import logging
import random
from typing import Any, Dict, List, Optional, Sequence

from tenseflow.config import TenseFlowConfig
from tenseflow.lexicon import LexicalPools, default_pools
from tenseflow.phonetic import PhoneticResolver
from tenseflow.reference import load_reference_tables
from tenseflow.templates import get_template_set

logger = logging.getLogger(__name__)


class ExampleGenerator:
    """Samples one pronoun, noun, time, verb and template per example.

    All randomness goes through ``rng``; pass ``random.Random(seed)`` to make
    output reproducible. No state is kept between calls.
    """

    def __init__(
        self,
        config: Optional[TenseFlowConfig] = None,
        *,
        rng: Optional[random.Random] = None,
        pools: Optional[LexicalPools] = None,
        resolver: Optional[PhoneticResolver] = None,
    ) -> None:
        self.config = config or TenseFlowConfig()
        self.rng = rng or random.Random()
        self.pools = pools or default_pools()
        self.resolver = resolver
        self.templates = get_template_set(self.config.template_set)
        tables = load_reference_tables(self.config.reference_version)
        unknown = sorted({t.tense for t in self.templates} - tables.tense_names)
        if unknown:
            raise RuntimeError(f"template set '{self.config.template_set}' emits tenses with no reference entry: {unknown}")

    def generate(self) -> Dict[str, Any]:
        pronoun = self.rng.choice(self.pools.pronouns)
        noun = self.rng.choice(self.pools.nouns)
        time = self.rng.choice(self.pools.times)
        verb = self.rng.choice(self.pools.verbs)
        template = self.rng.choice(self.templates)
        wh = self.rng.choice(template.wh_words) if template.wh_words else None
        example = template(
            pronoun,
            noun,
            time,
            verb,
            wh=wh,
            extra_attributes=self.config.extra_attributes,
            resolver=self.resolver,
        )
        logger.debug("generated %s example: %s", template.name, example["sentence"])
        return example

    def generate_batch(self, size: int) -> List[Dict[str, Any]]:
        if size <= 0:
            raise ValueError(f"size must be > 0, got: {size}")
        return [self.generate() for _ in range(size)]

    def pick(self, batch: Sequence[Dict[str, Any]]) -> Dict[str, Any]:
        if not batch:
            raise ValueError("batch must not be empty")
        return self.rng.choice(list(batch))

    def generate_for_display(self) -> Dict[str, Any]:
        """One example for the page; batch-then-pick only when ``batch_size`` > 1."""
        if self.config.batch_size == 1:
            return self.generate()
        return self.pick(self.generate_batch(self.config.batch_size))


def generate(rng: Optional[random.Random] = None, config: Optional[TenseFlowConfig] = None) -> Dict[str, Any]:
    return ExampleGenerator(config, rng=rng).generate()
