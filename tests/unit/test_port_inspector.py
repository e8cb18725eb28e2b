"""Tests for port inspection."""

from __future__ import annotations

from src.killport.platform_strategy import UNIX_STRATEGY, WINDOWS_STRATEGY
from src.killport.port_inspector import inspect_port
from tests.helpers.command_runner_stub import StubCommandRunner

LSOF_HEADER = "COMMAND   PID  USER   FD   TYPE  DEVICE SIZE/OFF NODE NAME"


class TestUnixInspection:
    """Tests for the lsof-based inspector."""

    def test_deduplicates_pids_in_first_seen_order(self, stub_runner: StubCommandRunner) -> None:
        """Identifiers [A, B, A, C] become [A, B, C]."""
        stub_runner.add(
            ["lsof", "-i", ":8080"],
            stdout="\n".join(
                [
                    LSOF_HEADER,
                    "node  100 alice 23u IPv4 0x1 0t0 TCP *:8080 (LISTEN)",
                    "ruby  200 bob   11u IPv4 0x2 0t0 TCP *:8080 (LISTEN)",
                    "node  100 alice 24u IPv6 0x3 0t0 TCP *:8080 (LISTEN)",
                    "nginx 300 root  6u  IPv4 0x4 0t0 TCP *:8080 (LISTEN)",
                ]
            ),
        )

        inspection = inspect_port(8080, UNIX_STRATEGY, stub_runner)

        assert inspection.pids == ["100", "200", "300"]
        assert inspection.summary.splitlines()[0] == "  PID: 100  Name: node  User: alice"

    def test_non_zero_exit_means_no_process(self, stub_runner: StubCommandRunner) -> None:
        """lsof exits 1 when nothing is bound."""
        stub_runner.add(["lsof", "-i", ":8080"], returncode=1)

        assert inspect_port(8080, UNIX_STRATEGY, stub_runner).is_empty

    def test_empty_output_means_no_process(self, stub_runner: StubCommandRunner) -> None:
        stub_runner.add(["lsof", "-i", ":8080"], stdout="   \n")

        assert inspect_port(8080, UNIX_STRATEGY, stub_runner).is_empty

    def test_missing_utility_means_no_process(self, stub_runner: StubCommandRunner) -> None:
        """A missing lsof binary yields an empty result instead of an error."""
        stub_runner.fail_with(["lsof", "-i", ":8080"], FileNotFoundError("lsof"))

        inspection = inspect_port(8080, UNIX_STRATEGY, stub_runner)

        assert inspection.is_empty
        assert inspection.port == 8080

    def test_undecodable_output_means_no_process(self, stub_runner: StubCommandRunner) -> None:
        """A runner that fails to decode output yields an empty result."""
        stub_runner.fail_with(
            ["lsof", "-i", ":8080"],
            UnicodeDecodeError("utf-8", b"\xc9COUTE", 0, 1, "invalid continuation byte"),
        )

        assert inspect_port(8080, UNIX_STRATEGY, stub_runner).is_empty

    def test_replacement_characters_in_names_are_kept(self, stub_runner: StubCommandRunner) -> None:
        stub_runner.add(["lsof", "-i", ":8080"], stdout=f"{LSOF_HEADER}\n\ufffdCOUTE 4242 root")

        inspection = inspect_port(8080, UNIX_STRATEGY, stub_runner)

        assert inspection.pids == ["4242"]
        assert inspection.entries[0].name == "\ufffdCOUTE"


class TestWindowsInspection:
    """Tests for the netstat/tasklist inspector."""

    NETSTAT = "\n".join(
        [
            "  Proto  Local Address          Foreign Address        State           PID",
            "  TCP    0.0.0.0:3000           0.0.0.0:0              LISTENING       4321",
            "  TCP    [::]:3000              [::]:0                 LISTENING       4321",
            "  TCP    127.0.0.1:3000         127.0.0.1:60000        ESTABLISHED     8765",
            "  TCP    127.0.0.1:60000        127.0.0.1:3000         ESTABLISHED     1111",
            "  TCP    0.0.0.0:30000          0.0.0.0:0              LISTENING       2222",
        ]
    )

    def test_resolves_names_once_per_pid(self, stub_runner: StubCommandRunner) -> None:
        """Each distinct PID is looked up with tasklist exactly once."""
        stub_runner.add(["netstat", "-ano"], stdout=self.NETSTAT)
        stub_runner.add(
            ["tasklist", "/FI", "PID eq 4321", "/FO", "CSV", "/NH"],
            stdout='"node.exe","4321","Console","1","40,000 K"',
        )
        stub_runner.add(
            ["tasklist", "/FI", "PID eq 8765", "/FO", "CSV", "/NH"],
            stdout="INFO: No tasks are running which match the specified criteria.",
        )

        inspection = inspect_port(3000, WINDOWS_STRATEGY, stub_runner)

        assert inspection.pids == ["4321", "8765"]
        assert inspection.summary.splitlines() == [
            "  PID: 4321  Name: node.exe  State: LISTENING",
            "  PID: 8765  Name: Unknown  State: ESTABLISHED",
        ]
        assert len(stub_runner.commands_starting_with("tasklist")) == 2

    def test_name_lookup_failure_uses_unknown(self, stub_runner: StubCommandRunner) -> None:
        stub_runner.add(["netstat", "-ano"], stdout=self.NETSTAT)
        stub_runner.fail_with(["tasklist", "/FI", "PID eq 4321", "/FO", "CSV", "/NH"], OSError("denied"))

        inspection = inspect_port(3000, WINDOWS_STRATEGY, stub_runner)

        assert inspection.entries[0].name == "Unknown"

    def test_undecodable_name_lookup_uses_unknown(self, stub_runner: StubCommandRunner) -> None:
        stub_runner.add(["netstat", "-ano"], stdout=self.NETSTAT)
        stub_runner.fail_with(
            ["tasklist", "/FI", "PID eq 4321", "/FO", "CSV", "/NH"],
            UnicodeDecodeError("cp1252", b"\x90", 0, 1, "character maps to <undefined>"),
        )

        inspection = inspect_port(3000, WINDOWS_STRATEGY, stub_runner)

        assert inspection.entries[0].name == "Unknown"

    def test_no_matching_rows(self, stub_runner: StubCommandRunner) -> None:
        stub_runner.add(["netstat", "-ano"], stdout=self.NETSTAT)

        assert inspect_port(4000, WINDOWS_STRATEGY, stub_runner).is_empty
        assert stub_runner.commands_starting_with("tasklist") == []
