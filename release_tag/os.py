import contextlib
import os
import subprocess


class InputError(ValueError):
    pass


def run(cmd, workdir=None):
    """Run ``cmd`` quietly and return its exit status."""
    print(f"[execute] {' '.join(cmd)} - {workdir or os.getcwd()}")
    return subprocess.run(
        cmd,
        cwd=workdir,
        stdout=subprocess.DEVNULL,
        stderr=subprocess.DEVNULL,
        check=False,
    ).returncode


def input_key(name):
    return "INPUT_" + name.replace(" ", "_").upper()


def get_input(name, required=False):
    value = os.environ.get(input_key(name), "").strip()
    if required and not value:
        raise InputError(f"Input required and not supplied: {name}")
    return value


def add_input(name, value):
    if value is not None:
        os.environ[input_key(name)] = value


def _open(env_file):
    path = os.environ.get(env_file)
    if not path:
        return None
    return open(path, "a", encoding="utf-8")


def publish(outputs, variables):
    """Write step outputs and exported variables, or nothing at all.

    Both target files are opened before either is written, and the process
    environment is only updated once the files are done.
    """
    with contextlib.ExitStack() as stack:
        env_file = _open("GITHUB_ENV")
        if env_file is not None:
            stack.enter_context(env_file)
        output_file = _open("GITHUB_OUTPUT")
        if output_file is not None:
            stack.enter_context(output_file)

        for name, value in outputs.items():
            if output_file is None:
                print(f"OUTPUT: {name}={value}")
            else:
                output_file.write(f"{name}={value}\n")
        if env_file is not None:
            for name, value in variables.items():
                env_file.write(f"{name}={value}\n")

    os.environ.update(variables)


def fail(message):
    print(f"::error::{message}")
    return 1
