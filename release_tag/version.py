import re
import semver

VERSION_RE = re.compile(r"^(0|[1-9]\d*)\.(0|[1-9]\d*)\.(0|[1-9]\d*)$")
DEFAULT_VERSION = semver.Version(0, 1, 0)
PRERELEASE_TOKEN = "develop"

MAJOR = "MAJOR"
MINOR = "MINOR"
PATCH = "PATCH"
UPGRADE_TYPES = (MAJOR, MINOR, PATCH)


def normalize_upgrade_type(value):
    """Map an upgrade type input to MAJOR, MINOR or PATCH (the default)."""
    upgrade = (value or PATCH).strip().upper()
    return upgrade if upgrade in UPGRADE_TYPES else PATCH


def parse_version(text):
    """Parse a plain ``MAJOR.MINOR.PATCH`` tag, returning None when it is not one."""
    if not text:
        return None
    match = VERSION_RE.match(text.strip())
    if match is None:
        return None
    major, minor, patch = (int(group) for group in match.groups())
    return semver.Version(major, minor, patch)


def format_version(version):
    return f"{version.major}.{version.minor}.{version.patch}"


def format_prerelease(base, build):
    return str(
        semver.Version(
            base.major, base.minor, base.patch, prerelease=f"{PRERELEASE_TOKEN}.{build}"
        )
    )


def next_main_version(last_tag, upgrade_type):
    base = parse_version(last_tag)
    if base is None:
        print(f"No existing main tag found, starting with {DEFAULT_VERSION}")
        base = DEFAULT_VERSION
    else:
        print(f"Parsed existing main tag: {format_version(base)}")

    upgrade = normalize_upgrade_type(upgrade_type)
    if upgrade == MAJOR:
        return base.bump_major()
    if upgrade == MINOR:
        return base.bump_minor()
    return base.bump_patch()


def last_build(base, last_develop_tag):
    """Return the build number of ``last_develop_tag`` if it belongs to ``base``."""
    pattern = re.compile(
        rf"^{re.escape(format_version(base))}-{PRERELEASE_TOKEN}\.(\d+)$"
    )
    match = pattern.match((last_develop_tag or "").strip())
    if match is None:
        return None
    return int(match.group(1))


def next_prerelease_version(last_main_tag, last_develop_tag):
    """Return ``(base, build)`` for the next pre-release of the upcoming stable version.

    The base is the last stable version as-is. The build continues from
    ``last_develop_tag`` only when that tag was cut from the same base, and
    otherwise restarts at 1.
    """
    base = parse_version(last_main_tag)
    if base is None:
        print(f"No main tag found, using base: {DEFAULT_VERSION}")
        base = DEFAULT_VERSION
    else:
        print(f"Using main tag as base: {format_version(base)}")

    build = last_build(base, last_develop_tag)
    if build is None:
        print("No matching develop tag found, starting build at 0")
        build = 0
    else:
        print(f"Found existing build number: {build}")
    return base, build + 1


def next_patch(candidate):
    return format_version(semver.Version.parse(candidate).bump_patch())


def next_build(candidate):
    return str(semver.Version.parse(candidate).bump_prerelease(PRERELEASE_TOKEN))
