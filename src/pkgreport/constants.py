"""Constants for pkgreport."""


class OperationKind:
    """Stable operation ids; also used as progress span ids."""

    MESSAGE = "message"
    RUN_SCRIPT = "run-script"
    READ_INSTALLED = "read-installed-packages"
    REMOVE = "remove-resolvable"
    INSTALL = "install-resolvable"
    DOWNLOAD = "download"

    ALL: tuple[str, ...] = (
        MESSAGE,
        RUN_SCRIPT,
        READ_INSTALLED,
        REMOVE,
        INSTALL,
        DOWNLOAD,
    )


class Labels:
    """Label templates for progress spans and failure reports."""

    RUNNING_SCRIPT = "Running: {script}  ({task}, {path})"
    READING_INSTALLED = "Reading installed packages"
    REMOVING = "Removing {resolvable}"
    REMOVAL_FAILED = "Removal of {resolvable} failed:"
    INSTALLING = "Installing: {name}-{edition}"
    INSTALL_FAILED = "Installation of {resolvable} failed"
    INSTALL_RETRY = "Install failed, will retry more aggressively (with --nodeps, --force)."
    ARI_QUESTION = "Abort, retry, ignore?"
    DOWNLOAD_FAILED = "Download of {uri} failed:"
