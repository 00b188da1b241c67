"""Tests for the state mapper and the shipped vocabularies."""

import pytest

from aiopowerlink import (
    REVISION_3,
    REVISION_4,
    PowerLinkUnsupportedTarget,
    StateMapper,
    Status,
)

V3 = REVISION_3.states
V4 = REVISION_4.states


class TestToCanonical:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("Disarm", Status.DISARMED),
            ("NotReady", Status.DISARMED),
            ("Exit Delay", Status.EXIT_DELAY),
            ("HOME", Status.ARMED_HOME),
            ("AWAY", Status.ARMED_AWAY),
            ("FAULT", Status.UNKNOWN),
            ("disarm", Status.UNKNOWN),
            ("", Status.UNKNOWN),
            (None, Status.UNKNOWN),
        ],
    )
    def test_revision_3(self, raw, expected):
        assert V3.to_canonical(raw) is expected

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("DISARM", Status.DISARMED),
            ("HOME", Status.ARMED_HOME),
            ("AWAY", Status.ARMED_AWAY),
            ("EXIT", Status.EXIT_DELAY),
            ("ALARM", Status.UNKNOWN),
        ],
    )
    def test_revision_4(self, raw, expected):
        assert V4.to_canonical(raw) is expected


class TestToRaw:
    @pytest.mark.parametrize(
        ("status", "command"),
        [
            (Status.DISARMED, "Disarm"),
            (Status.ARMED_HOME, "ArmHome"),
            (Status.ARMED_AWAY, "ArmAway"),
            ("home", "ArmHome"),
        ],
    )
    def test_revision_3(self, status, command):
        assert V3.to_raw(status) == command

    @pytest.mark.parametrize("mapper", [V3, V4], ids=["3.0", "4.0"])
    @pytest.mark.parametrize(
        "status", [Status.EXIT_DELAY, Status.UNKNOWN, "exit delay", "bogus"]
    )
    def test_observation_only_rejected(self, mapper, status):
        with pytest.raises(PowerLinkUnsupportedTarget, match="Cannot set status to"):
            mapper.to_raw(status)

    def test_settable_statuses_map_back(self):
        # Reading the state a command produces yields the commanded status.
        for status in (Status.DISARMED, Status.ARMED_HOME, Status.ARMED_AWAY):
            assert V4.to_canonical(V4.to_raw(status)) is status

    def test_non_settable_entries_dropped(self):
        mapper = StateMapper({}, {Status.EXIT_DELAY: "Exit", Status.DISARMED: "Off"})
        assert mapper.to_raw(Status.DISARMED) == "Off"
        with pytest.raises(PowerLinkUnsupportedTarget):
            mapper.to_raw(Status.EXIT_DELAY)

    def test_unsupported_target_is_value_error(self):
        with pytest.raises(ValueError):
            V3.to_raw(Status.UNKNOWN)


class TestNonStringRaw:
    @pytest.mark.parametrize("raw", [["HOME"], {"state": "HOME"}, 3, True])
    def test_non_string_is_unknown(self, raw):
        assert V3.to_canonical(raw) is Status.UNKNOWN
        assert V4.to_canonical(raw) is Status.UNKNOWN
