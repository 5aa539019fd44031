"""Shared constants for get_openjdk."""

from __future__ import annotations

PACKAGE_NAME = "get_openjdk"
PROGRAM_NAME = "get-openjdk"

DEFAULT_API_BASE_URL = "https://api.adoptium.net"
# Linux/x64 HotSpot JDK builds from Eclipse Temurin, latest GA release.
BINARY_LATEST_PATH = (
    "/v3/binary/latest/{version}/ga/linux/x64/jdk/hotspot/normal/eclipse"
)
BINARY_LATEST_QUERY = {"project": "jdk"}

SYMLINK_PREFIX = "jdk-"
PROBE_FILE_PREFIX = f"{PROGRAM_NAME}."

EXIT_CODE_SUCCESS = 0
EXIT_CODE_FAILURE = 1
EXIT_CODE_USAGE = 1
EXIT_CODE_INTERRUPT = 130

HTTP_TIMEOUT_SECONDS = 30.0
DOWNLOAD_CHUNK_SIZE = 1024 * 64

EXAMPLE_JDK_VERSION = "8"
EXAMPLE_ARCHIVE_NAME = "OpenJDK8U-jdk_x64_linux_hotspot_8u312b07.tar.gz"
EXAMPLE_ARCHIVE_DIR = "jdk8u312-b07"
