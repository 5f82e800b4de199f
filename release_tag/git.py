import subprocess
import release_tag.os


class TagStore:
    """Answers whether a tag has already been used."""

    def exists(self, tag):
        raise NotImplementedError


class GitTagStore(TagStore):
    def __init__(self, path=None):
        self.path = path

    def exists(self, tag):
        try:
            retval = release_tag.os.run(
                ["git", "rev-parse", "--verify", "--quiet", f"refs/tags/{tag}"],
                self.path,
            )
        except (OSError, subprocess.SubprocessError):
            return False
        return retval == 0


def tag_exists(store, tag):
    try:
        return store.exists(tag)
    except Exception as e:
        print(f"tag lookup for {tag} failed, assuming it is free: {e}")
        return False


def resolve_unique(store, candidate, advance):
    """Advance ``candidate`` until ``store`` no longer knows it as a tag."""
    while tag_exists(store, candidate):
        print(f"tag {candidate} already exists")
        candidate = advance(candidate)
    return candidate
