"""End-to-end scenario: create, run, exec into and remove a container."""

from __future__ import annotations

import os
import random
import string
from typing import Any

from docker_engine_client import (
    ConflictError,
    DockerClient,
    NotFoundError,
    collect_output,
    config_from_env,
)

IMAGE = os.getenv("DOCKER_DEMO_IMAGE", "alpine:3.20")
LOG_LEVEL = os.getenv("DOCKER_DEMO_LOG", "info")


def log_section(title: str) -> None:
    print("\n" + "=" * 80)
    print(title)
    print("=" * 80)


def pretty_rows(rows: list[dict[str, Any]], keys: list[str]) -> None:
    if not rows:
        print("  (no data)")
        return
    for row in rows:
        print("  " + ", ".join(f"{key}={row.get(key)!r}" for key in keys))


def random_name() -> str:
    return "demo-" + "".join(random.choices(string.ascii_lowercase, k=6))


def main() -> None:
    config = config_from_env()
    config.log_level = LOG_LEVEL
    client = DockerClient.from_config(config)

    log_section("Docker Engine Python Client: Container Lifecycle")
    print(f"Connecting to {client.base_url}")
    negotiated = client.negotiate_api_version()
    print(f"→ Using API version {client.version} (negotiated: {negotiated})")
    version = client.system.version()
    print(f"→ Server {version.get('Version')} on {version.get('Os')}/{version.get('Arch')}")

    log_section("Step 1: Create Container")
    name = random_name()
    created = client.containers.create(
        {
            "Name": name,
            "Image": IMAGE,
            "Cmd": ["sh", "-c", "echo started; sleep 300"],
            "Labels": {"demo": "docker-engine-client"},
        }
    )
    container_id = created["Id"]
    print(f"→ Created {name} ({container_id[:12]})")

    try:
        log_section("Step 2: Start and List")
        client.containers.start(container_id)
        running = client.containers.list({"filters": {"label": ["demo=docker-engine-client"]}})
        pretty_rows(running, ["Id", "Names", "State"])

        log_section("Step 3: Exec a Command")
        exec_instance = client.execs.create(
            container_id,
            {"Cmd": ["uname", "-a"], "AttachStdout": True, "AttachStderr": True},
        )
        response = client.execs.start(exec_instance["Id"], {"Detach": False, "Tty": False})
        try:
            output = collect_output(response.iter_bytes())
        finally:
            response.close()
        print(f"→ stdout: {output.stdout_text().strip()}")
        inspected = client.execs.inspect(exec_instance["Id"])
        print(f"→ exit code {inspected.get('ExitCode')}")

        log_section("Step 4: Logs")
        response = client.containers.logs(container_id, {"stdout": True, "stderr": True})
        try:
            logs = collect_output(response.iter_bytes())
        finally:
            response.close()
        print(f"→ {logs.stdout_text().strip()}")

        log_section("Step 5: Stop")
        client.containers.stop(container_id, {"t": 1})
        print(f"→ Exit status {client.containers.wait(container_id)}")
    finally:
        try:
            client.containers.delete(container_id, {"force": True})
            print(f"→ Removed {name}")
        except (NotFoundError, ConflictError) as exc:
            print(f"→ Cleanup failed: {exc}")
        client.close()


if __name__ == "__main__":
    main()
