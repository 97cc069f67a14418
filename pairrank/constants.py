"""Constants for the pairrank application."""

# Log component names
COMPONENT_ENGINE = "engine"
COMPONENT_CONTROLLER = "controller"
COMPONENT_CLI = "cli"
COMPONENT_INGEST = "ingest"
COMPONENT_WRITER = "atomic_writer"

# Default file name for the exported ranking
DEFAULT_OUTPUT_FILENAME = "ranking.csv"

# Interactive answers accepted by the CLI
CHOICE_TARGET = "1"
CHOICE_CANDIDATE = "2"
CHOICE_SKIP = "s"
CHOICE_VIEW = "v"
CHOICE_RESTART = "r"
CHOICE_QUIT = "q"

CLI_CHOICES: tuple[str, ...] = (
    CHOICE_TARGET,
    CHOICE_CANDIDATE,
    CHOICE_SKIP,
    CHOICE_VIEW,
    CHOICE_RESTART,
    CHOICE_QUIT,
)

# Delimiter between the label field and any trailing columns
FIELD_DELIMITER = ","
