"""Tests for the package logger."""

import logging

from cowtrie import Trie
from cowtrie.logging import get_logger


class TestGetLogger:
    def test_root_logger_name(self):
        assert get_logger().name == "cowtrie"

    def test_child_logger_name(self):
        logger = get_logger("trie")
        assert logger.name == "cowtrie.trie"
        assert logger.parent is get_logger()


class TestTrieLogging:
    def test_remove_absent_logs_debug(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="cowtrie"):
            Trie.empty().put("a", 1).remove("zz")
        assert any("no value stored" in r.getMessage() for r in caplog.records)

    def test_pruning_logs_count(self, caplog):
        t = Trie.empty().put("a", 1).put("abcd", 4)
        with caplog.at_level(logging.DEBUG, logger="cowtrie"):
            t.remove("abcd")
        assert any("pruned 2 empty node(s)" in r.getMessage() for r in caplog.records)

    def test_silent_above_debug(self, caplog):
        with caplog.at_level(logging.INFO, logger="cowtrie"):
            Trie.empty().remove("missing")
        assert caplog.records == []
