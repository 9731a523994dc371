"""Shared test fixtures."""
from __future__ import annotations

import pytest

from vocab_quiz.models import FillQuestion, MCQQuestion, TFQuestion, VocabEntry


@pytest.fixture
def sample_entries():
    """Five quiz-eligible entries with distinct meanings."""
    return [
        VocabEntry("cat", "/kæt/", "feline"),
        VocabEntry("dog", "/dɔɡ/", "canine"),
        VocabEntry("cow", "/kaʊ/", "bovine"),
        VocabEntry("horse", "/hɔrs/", "equine"),
        VocabEntry("sheep", "/ʃiːp/", "ovine"),
    ]


@pytest.fixture
def mixed_entries():
    """Entries where only some are quiz-eligible."""
    return [
        VocabEntry("cat", "", "feline"),
        VocabEntry("dog", "", ""),
        VocabEntry("cow", "", "bovine"),
        VocabEntry("", "", "orphan meaning"),
        VocabEntry("horse", "", "equine"),
    ]


@pytest.fixture
def sample_quiz():
    """One question of each kind."""
    return [
        MCQQuestion(question="cat", options=["canine", "feline", "bovine", "equine"], answer="feline"),
        TFQuestion(question="dog", meaning="canine", answer=True),
        FillQuestion(question="cow", answer="bovine"),
    ]


@pytest.fixture
def vocab_csv_content():
    """Minimal comma-separated word list with a header."""
    return """\
Word,IPA,Meaning
cat,/kæt/,feline
dog,/dɔɡ/,canine
"cow","/kaʊ/","bovine"
"""


@pytest.fixture
def vocab_tsv_content():
    """Minimal tab-separated word list without a header."""
    return "cat\t/kæt/\tfeline\r\ndog\t/dɔɡ/\tcanine\r\n\r\ncow\t\tbovine\r\n"
