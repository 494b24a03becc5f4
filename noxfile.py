import nox

PYTHON_VERSIONS = ["3.11", "3.12", "3.13"]

nox.options.default_venv_backend = "uv"
nox.options.sessions = ["tests"]


@nox.session(python=PYTHON_VERSIONS)
def tests(session: nox.Session) -> None:
    session.run_install(
        "uv",
        "sync",
        "--extra",
        "test",
        env={"UV_PROJECT_ENVIRONMENT": session.virtualenv.location},
    )
    session.run(
        "pytest",
        "--cov=gqlform",
        "--cov-report=term-missing",
        "--cov-fail-under=90",
        *session.posargs,
    )


@nox.session(python=PYTHON_VERSIONS[-1])
def cli_smoke(session: nox.Session) -> None:
    """Build the sample form through the installed console script."""
    session.install(".")
    session.run(
        "gqlform",
        "build",
        "-m",
        "tests/data/create_user.graphql",
        "-d",
        "tests/data/defs.graphql",
        "-r",
        "tests/data/resolvers.yaml",
    )
