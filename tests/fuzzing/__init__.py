"""Fuzz testing suite for BestLang."""

from .fuzz import Fuzzer, FuzzRunner, random_choice_weighted

__all__ = ["Fuzzer", "FuzzRunner", "random_choice_weighted"]
