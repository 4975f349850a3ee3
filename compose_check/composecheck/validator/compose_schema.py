"""Known keys and value formats for Compose documents.

This is a hand-maintained subset of the Compose file format, not the full
specification.
"""

from __future__ import annotations

import re

VALID_TOP_LEVEL_KEYS = {
    "version",
    "services",
    "networks",
    "volumes",
    "configs",
    "secrets",
    "name",
}

VALID_SERVICE_KEYS = {
    "image",
    "build",
    "command",
    "entrypoint",
    "container_name",
    "depends_on",
    "environment",
    "env_file",
    "expose",
    "ports",
    "volumes",
    "networks",
    "restart",
    "deploy",
    "labels",
    "logging",
    "healthcheck",
    "configs",
    "secrets",
    "working_dir",
    "user",
    "hostname",
    "domainname",
    "dns",
    "dns_search",
    "extra_hosts",
    "links",
    "external_links",
    "stdin_open",
    "tty",
    "cap_add",
    "cap_drop",
    "devices",
    "privileged",
    "read_only",
    "security_opt",
    "tmpfs",
    "sysctls",
    "ulimits",
    "stop_signal",
    "stop_grace_period",
    "init",
    "platform",
    "profiles",
    "pull_policy",
    "mem_limit",
    "memswap_limit",
    "mem_reservation",
    "cpus",
    "cpu_shares",
    "cpu_quota",
    "cpu_period",
    "cpuset",
    "shm_size",
    "pid",
    "ipc",
    "extends",
    "scale",
    "runtime",
    "isolation",
    "network_mode",
    "group_add",
    "cgroup_parent",
    "credential_spec",
    "oom_score_adj",
    "storage_opt",
    "annotations",
}

# Ordered, the error message lists them as written here
VALID_RESTART_POLICIES = ["no", "always", "on-failure", "unless-stopped"]

# "80", "80/udp", "8000-8010", and the same forms with a host side in front
CONTAINER_PORT_RE = re.compile(r"\d+([:-]\d+)?(/\w+)?", re.ASCII)
HOST_CONTAINER_PORT_RE = re.compile(r"\d+([:-]\d+)?:\d+([:-]\d+)?(/\w+)?", re.ASCII)


def is_valid_port_spec(port: str) -> bool:
    """Return True when a short-syntax port string has a recognised shape."""
    return bool(
        CONTAINER_PORT_RE.fullmatch(port) or HOST_CONTAINER_PORT_RE.fullmatch(port)
    )


def base_restart_policy(restart: str) -> str:
    """Strip a retry suffix such as the ":3" of "on-failure:3"."""
    return restart.split(":", 1)[0]


def is_named_volume(volume: str) -> bool:
    """Heuristic: no ":" and no leading "/" or "." means a named volume reference."""
    return ":" not in volume and not volume.startswith(("/", "."))
