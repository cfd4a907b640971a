"""
Container runtime implementation using the Docker SDK for Python.

This module provides the DockerRuntime class, which connects to a Docker
daemon, lists the running containers and opens one-shot statistics
snapshots from the `/containers/{id}/stats` endpoint.
"""

import logging
from contextlib import contextmanager
from typing import IO, Iterator, List, Optional

import docker
import requests
import urllib3
from docker.errors import DockerException

from ..models.records import ContainerInfo
from ..validation import DaemonConnectionError, StatsUnavailableError
from .base import ContainerRuntime

logger = logging.getLogger(__name__)


class DockerRuntime(ContainerRuntime):
    """
    Talks to a Docker daemon through `docker.DockerClient`.

    The connection is configured from the environment (DOCKER_HOST,
    DOCKER_TLS_VERIFY, DOCKER_CERT_PATH) unless a base URL is given. The API
    version is negotiated with the daemon.

    Attributes:
        base_url: Explicit daemon URL, or None to read it from the environment.
        timeout: Timeout in seconds for every API call.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: float = 10.0,
        client: Optional[docker.DockerClient] = None,
    ):
        """
        Initializes the DockerRuntime.

        Args:
            base_url: Daemon URL (e.g. "unix:///var/run/docker.sock").
            timeout: Timeout in seconds for API calls.
            client: An already-configured client to use instead of creating one.
        """
        self.base_url = base_url
        self.timeout = timeout
        self._client = client

    def connect(self) -> "DockerRuntime":
        """
        Creates the client and checks that the daemon answers.

        Raises:
            DaemonConnectionError: If the daemon cannot be reached.
        """
        if self._client is None:
            try:
                if self.base_url:
                    self._client = docker.DockerClient(
                        base_url=self.base_url, version="auto", timeout=self.timeout
                    )
                else:
                    self._client = docker.from_env(version="auto", timeout=self.timeout)
            except DockerException as e:
                raise DaemonConnectionError(f"Could not connect to Docker daemon: {e}") from e

        try:
            self._client.ping()
        except (DockerException, requests.RequestException) as e:
            raise DaemonConnectionError(f"Could not connect to Docker daemon: {e}") from e

        logger.info("Docker daemon connection established")
        return self

    @property
    def client(self) -> docker.DockerClient:
        if self._client is None:
            self.connect()
        return self._client

    def list_containers(self) -> List[ContainerInfo]:
        # The low-level listing avoids one inspect call per container.
        try:
            summaries = self.client.api.containers()
        except (DockerException, requests.RequestException) as e:
            raise DaemonConnectionError(f"Could not list containers: {e}") from e

        containers = []
        for summary in summaries:
            names = summary.get("Names") or []
            # "/" alone strips to an empty name.
            name = (names[0].lstrip("/") if names else "") or summary["Id"]
            containers.append(ContainerInfo(id=summary["Id"], name=name))
        return containers

    @contextmanager
    def open_stats(self, container_id: str) -> Iterator[IO[bytes]]:
        api = self.client.api
        url = f"{api.base_url}/v{api.api_version}/containers/{container_id}/stats"
        try:
            response = api.get(
                url, params={"stream": "false"}, stream=True, timeout=self.timeout
            )
        except requests.RequestException as e:
            raise StatsUnavailableError(
                f"Could not get stats: {e}", container_id=container_id
            ) from e

        with response:
            try:
                response.raise_for_status()
            except requests.HTTPError as e:
                raise StatsUnavailableError(
                    f"Could not get stats: {e}", container_id=container_id
                ) from e
            response.raw.decode_content = True
            # The body is read by the caller, so transport errors surface at the yield.
            try:
                yield response.raw
            except (urllib3.exceptions.HTTPError, requests.RequestException, OSError) as e:
                raise StatsUnavailableError(
                    f"Stats stream interrupted: {e}", container_id=container_id
                ) from e

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None
