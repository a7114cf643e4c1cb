"""
Shared pytest fixtures for integration tests.

This module provides a RabbitMQ broker using testcontainers for automatic
container management.

If testcontainers or Docker is not available, tests are automatically skipped.
"""

from __future__ import annotations

from collections.abc import AsyncGenerator, Generator
from typing import Any

import pytest
import pytest_asyncio
from opentelemetry.sdk.trace import TracerProvider

from rabbitlink import RabbitMQClient, RabbitMQClientConfig

# ============================================================================
# Testcontainers Detection
# ============================================================================

TESTCONTAINERS_AVAILABLE = False

try:
    from testcontainers.core.container import DockerContainer
    from testcontainers.core.waiting_utils import wait_for_logs

    TESTCONTAINERS_AVAILABLE = True
except ImportError:
    DockerContainer = None  # type: ignore[assignment, misc]
    wait_for_logs = None  # type: ignore[assignment]


def is_docker_available() -> bool:
    """Check if Docker is available for running containers."""
    import subprocess

    try:
        result = subprocess.run(
            ["docker", "info"],
            capture_output=True,
            timeout=5,
        )
        return result.returncode == 0
    except (subprocess.TimeoutExpired, FileNotFoundError, OSError):
        return False


DOCKER_AVAILABLE = is_docker_available()


# ============================================================================
# Skip Conditions
# ============================================================================

skip_if_no_rabbitmq_infra = pytest.mark.skipif(
    not (TESTCONTAINERS_AVAILABLE and DOCKER_AVAILABLE),
    reason="RabbitMQ test infrastructure not available (requires testcontainers and docker)",
)


# ============================================================================
# RabbitMQ Container Fixture
# ============================================================================


@pytest.fixture(scope="session")
def rabbitmq_container() -> Generator[Any, None, None]:
    """
    Provide RabbitMQ container for integration tests.

    Container is shared across all tests in the session for efficiency.
    """
    if not TESTCONTAINERS_AVAILABLE or not DOCKER_AVAILABLE:
        pytest.skip("RabbitMQ testcontainer not available")

    container = DockerContainer("rabbitmq:3-management")
    container.with_exposed_ports(5672, 15672)
    container.with_env("RABBITMQ_DEFAULT_USER", "guest")
    container.with_env("RABBITMQ_DEFAULT_PASS", "guest")
    container.start()

    # Wait for RabbitMQ to be ready
    wait_for_logs(container, "started TCP listener on", timeout=60)

    yield container

    container.stop()


@pytest.fixture(scope="session")
def rabbitmq_connection_url(rabbitmq_container: Any) -> str:
    """Get RabbitMQ connection URL from container."""
    host = rabbitmq_container.get_container_host_ip()
    port = rabbitmq_container.get_exposed_port(5672)
    return f"amqp://guest:guest@{host}:{port}/"


@pytest_asyncio.fixture
async def rabbitmq_client(
    rabbitmq_connection_url: str,
    tracer_provider: TracerProvider,
) -> AsyncGenerator[RabbitMQClient, None]:
    """Provide a connected client with tracing, closed after the test."""
    client = RabbitMQClient(
        RabbitMQClientConfig(
            url=rabbitmq_connection_url,
            connection_name="rabbitlink-integration",
            prefetch_count=10,
            shutdown_timeout=2.0,
        ),
        tracer_provider=tracer_provider,
    )
    await client.connect()

    yield client

    if client.is_connected:
        await client.close()
