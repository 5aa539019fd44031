"""Install the latest Eclipse Temurin JDK for a major version and keep a jdk-<major> link."""

__version__ = "0.1.0"
