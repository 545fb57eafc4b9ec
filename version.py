import os
import subprocess


# Fallback for source distributions, where git metadata is unavailable
version = "0.1.0"


def describe():
    """Derive a version number from the closest git tag, if any."""
    try:
        description = subprocess.check_output(
            ["git", "describe", "--tags"],
            stderr=subprocess.STDOUT,
            cwd=os.path.dirname(os.path.abspath(__file__)),
            universal_newlines=True).strip()
    except (OSError, subprocess.CalledProcessError):
        return None

    parts = description.lstrip("v").split("-")
    if len(parts) == 1:  # tagged release
        return parts[0]
    elif len(parts) == 3:  # tag + a few commits
        tag, revision, commit = parts
        return "{}-r{}-{}".format(tag, revision, commit)
    else:
        raise RuntimeError("Invalid version format")


version = describe() or version
