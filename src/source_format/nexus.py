"""Download URLs for artifacts hosted in Liferay's Nexus repository."""
import posixpath

PUBLIC_REPOS_URL = (
    "https://repository.liferay.com/nexus/content/repositories/liferay-public-releases"
)


def get_jar_file_url(
    group: str, artifact: str, version: str, repository_url: str = PUBLIC_REPOS_URL
) -> str:
    """Build the download URL of a jar in a Maven-layout repository.

    Args:
        group: Dot separated group id, e.g. 'com.liferay'
        artifact: Artifact id
        version: Artifact version
        repository_url: Repository base URL

    Returns:
        Fully qualified jar URL
    """
    filename = f"{artifact}-{version}.jar"
    path = posixpath.join(group.replace(".", "/"), artifact, version, filename)
    return f"{repository_url}/{path}"


def get_liferay_jar_file_url(
    artifact: str, version: str, repository_url: str = PUBLIC_REPOS_URL
) -> str:
    return get_jar_file_url("com.liferay", artifact, version, repository_url)


def get_liferay_portal_jar_file_url(
    artifact: str, version: str, repository_url: str = PUBLIC_REPOS_URL
) -> str:
    return get_jar_file_url("com.liferay.portal", artifact, version, repository_url)
