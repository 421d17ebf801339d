from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from enum import Enum

from ..data.corpus import iter_lines
from .digraphs import Digraph, digraphs_of, normalize_word


class Language(str, Enum):
    CRK = "crk"  # nêhiyawêwin / Plains Cree
    ENG = "eng"


@dataclass
class Occurrence:
    crk: int = 0
    eng: int = 0

    def total(self: Occurrence) -> int:
        return self.crk + self.eng

    def of(self: Occurrence, language: Language) -> int:
        if language is Language.CRK:
            return self.crk
        return self.eng


@dataclass
class Classification:
    word: str
    language: Language
    log_prob_crk: float
    log_prob_eng: float

    @property
    def prob_crk(self: Classification) -> float:
        return math.exp(self.log_prob_crk)

    @property
    def prob_eng(self: Classification) -> float:
        return math.exp(self.log_prob_eng)


@dataclass
class DigraphClassifier:
    """Naive Bayes over word digraphs, trained on two word lists.

    Each word contributes at most one occurrence per distinct digraph. Scores
    use add-one smoothing; digraphs never seen in training are ignored.
    """

    features: dict[Digraph, Occurrence] = field(default_factory=dict)

    @classmethod
    def train(
        cls: type[DigraphClassifier],
        crk_path: str,
        eng_path: str,
        *,
        min_occurrences: int = 2,
        encoding: str = "utf-8",
    ) -> DigraphClassifier:
        model = cls()
        model.count_digraphs_in_file(crk_path, Language.CRK, encoding=encoding)
        model.count_digraphs_in_file(eng_path, Language.ENG, encoding=encoding)
        model.prune_features(min_occurrences)
        return model

    def add_word(self: DigraphClassifier, word: str, language: Language) -> None:
        for digraph in digraphs_of(normalize_word(word)):
            occ = self.features.setdefault(digraph, Occurrence())
            if language is Language.CRK:
                occ.crk += 1
            else:
                occ.eng += 1

    def count_digraphs_in_file(
        self: DigraphClassifier, path: str, language: Language, *, encoding: str = "utf-8"
    ) -> int:
        n = 0
        for line in iter_lines(path, encoding=encoding):
            self.add_word(line, language)
            n += 1
        logging.getLogger(__name__).info(
            "Counted digraphs in word list",
            extra={
                "event": "classifier_counted",
                "path": path,
                "language": language.value,
                "count": n,
                "features": len(self.features),
            },
        )
        return n

    def prune_features(self: DigraphClassifier, min_occurrences: int = 2) -> int:
        """Drop digraphs seen fewer than ``min_occurrences`` times; return how many."""
        before = len(self.features)
        self.features = {
            d: occ for d, occ in self.features.items() if occ.total() >= min_occurrences
        }
        pruned = before - len(self.features)
        logging.getLogger(__name__).info(
            "Pruned rare digraphs",
            extra={"event": "classifier_pruned", "pruned": pruned, "features": len(self.features)},
        )
        return pruned

    def num_features(self: DigraphClassifier) -> int:
        return len(self.features)

    def log_prob(self: DigraphClassifier, digraph: Digraph, language: Language) -> float | None:
        occ = self.features.get(digraph)
        if occ is None:
            return None
        numerator = occ.of(language) + 1
        denominator = occ.total() + self.num_features()
        return math.log(numerator) - math.log(denominator)

    def classify(self: DigraphClassifier, word: str) -> Classification:
        normalized = normalize_word(word)
        log_prob_crk = 0.0
        log_prob_eng = 0.0
        for digraph in digraphs_of(normalized):
            crk = self.log_prob(digraph, Language.CRK)
            eng = self.log_prob(digraph, Language.ENG)
            if crk is None or eng is None:
                continue
            log_prob_crk += crk
            log_prob_eng += eng
        language = Language.CRK if log_prob_crk > log_prob_eng else Language.ENG
        return Classification(
            word=normalized,
            language=language,
            log_prob_crk=log_prob_crk,
            log_prob_eng=log_prob_eng,
        )
