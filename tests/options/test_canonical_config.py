# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""Tests for CanonicalConfig read access and immutability."""

import dataclasses

import pytest

from benchrunner.options.models import CanonicalConfig, MemStats, OutputFormat


def _config() -> CanonicalConfig:
    return CanonicalConfig(
        items=(
            ("format", OutputFormat.MACHINE),
            ("verbose", False),
            ("mem_stats", MemStats.INCLUDE_SYS),
            ("duration", 0.5),
        )
    )


class TestAccess:
    def test_iterates_pairs_in_order(self) -> None:
        assert list(_config()) == [
            ("format", OutputFormat.MACHINE),
            ("verbose", False),
            ("mem_stats", MemStats.INCLUDE_SYS),
            ("duration", 0.5),
        ]

    def test_lookup(self) -> None:
        config = _config()
        assert config["duration"] == 0.5
        assert config.get("output") is None
        assert config.get("output", "bench/snapshots") == "bench/snapshots"
        assert "verbose" in config
        assert len(config) == 4

    def test_missing_key_raises(self) -> None:
        with pytest.raises(KeyError):
            _config()["output"]

    def test_typed_properties(self) -> None:
        config = _config()
        assert config.format is OutputFormat.MACHINE
        assert config.verbose is False
        assert config.mem_stats is MemStats.INCLUDE_SYS

    def test_property_defaults_on_empty_config(self) -> None:
        config = CanonicalConfig()
        assert config.format is OutputFormat.PRETTY
        assert config.verbose is True
        assert config.mem_stats is False


class TestImmutability:
    def test_cannot_reassign_items(self) -> None:
        config = _config()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.items = ()  # type: ignore[misc]

    def test_as_dict_is_a_copy(self) -> None:
        config = _config()
        copy = config.as_dict()
        copy["verbose"] = True
        assert config["verbose"] is False

    def test_duplicate_keys_rejected(self) -> None:
        with pytest.raises(ValueError, match="Duplicate keys"):
            CanonicalConfig(items=(("verbose", True), ("verbose", False)))
