#!/usr/bin/env python3

import argparse
import sys

import release_tag.git
import release_tag.os
import release_tag.version
from dotenv import load_dotenv

MAIN_BRANCH = "main"

INPUTS = (
    ("baseBranch", "--base-branch"),
    ("upgradeType", "--upgrade-type"),
    ("lastTag", "--last-tag"),
    ("lastMainTag", "--last-main-tag"),
    ("lastDevelopTag", "--last-develop-tag"),
)


def main_version(store, last_tag, upgrade_type):
    print(f"Using lastTag='{last_tag}'")
    candidate = release_tag.version.format_version(
        release_tag.version.next_main_version(last_tag, upgrade_type)
    )
    return release_tag.git.resolve_unique(
        store, candidate, release_tag.version.next_patch
    )


def prerelease_version(store, last_main_tag, last_develop_tag):
    print(f"Using lastMainTag='{last_main_tag}'")
    print(f"Using lastDevelopTag='{last_develop_tag}'")
    base, build = release_tag.version.next_prerelease_version(
        last_main_tag, last_develop_tag
    )
    candidate = release_tag.version.format_prerelease(base, build)
    return release_tag.git.resolve_unique(
        store, candidate, release_tag.version.next_build
    )


def next_version(
    store,
    base_branch,
    upgrade_type=None,
    last_tag=None,
    last_main_tag=None,
    last_develop_tag=None,
):
    """Compute the next unused tag for ``base_branch``.

    ``main`` gets a stable ``MAJOR.MINOR.PATCH`` bump of ``last_tag``; every
    other branch gets a ``-develop.N`` pre-release of ``last_main_tag``.
    """
    upgrade_type = release_tag.version.normalize_upgrade_type(upgrade_type)
    print(f"Using baseBranch='{base_branch}'")
    print(f"Using upgradeType='{upgrade_type}'")
    if base_branch == MAIN_BRANCH:
        return main_version(store, last_tag, upgrade_type)
    return prerelease_version(store, last_main_tag, last_develop_tag)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="next-release-tag",
        description="Computes the next unused release or pre-release tag",
    )
    for name, flag in INPUTS:
        parser.add_argument(flag, dest=name, default=None)
    parser.add_argument("--config", default=".config", help="dotenv file with inputs")
    parser.add_argument("--repo", default=None, help="git repository to probe")
    return parser.parse_args(argv)


def run(args):
    load_dotenv(args.config)
    for name, _ in INPUTS:
        release_tag.os.add_input(name, getattr(args, name))

    base_branch = release_tag.os.get_input("baseBranch", required=True)
    version = next_version(
        release_tag.git.GitTagStore(args.repo),
        base_branch,
        upgrade_type=release_tag.os.get_input("upgradeType"),
        last_tag=release_tag.os.get_input("lastTag"),
        last_main_tag=release_tag.os.get_input("lastMainTag"),
        last_develop_tag=release_tag.os.get_input("lastDevelopTag"),
    )

    release_tag.os.publish({"version": version}, {"NEW_VERSION": version})
    print(f"NEW_VERSION={version}")
    return version


def main(argv=None):
    try:
        args = parse_args(argv)
    except SystemExit as e:
        if not e.code:
            raise
        return release_tag.os.fail("invalid command line arguments, see usage above")

    try:
        version = run(args)
    except Exception as e:
        return release_tag.os.fail(str(e) or repr(e))

    print(version)
    return 0


if __name__ == "__main__":
    sys.exit(main())
