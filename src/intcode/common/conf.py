AMPLIFIER_NAMES = 'ABCDE'

SERIAL_PHASES = range(0, 5)     # Single pass through the chain
FEEDBACK_PHASES = range(5, 10)  # Ring is restarted until the last stage halts

EXIT_HALT = 0
EXIT_STARVED = 5
EXIT_KEYBOARD = 3
EXIT_MALFORMED = 4
EXIT_EXEC_ERROR = 100


class RunSettings:
    verbose: bool
    interactive: bool
    dump: bool
    inputs: list[int]

    def __init__(self):
        self.verbose = False
        self.interactive = False
        self.dump = False
        self.inputs = []

    def update(
        self,
        verbose: bool | None = None,
        interactive: bool | None = None,
        dump: bool | None = None,
        inputs: list[int] | None = None
    ):
        if verbose is not None:
            self.verbose = verbose

        if interactive is not None:
            self.interactive = interactive

        if dump is not None:
            self.dump = dump

        if inputs is not None:
            self.inputs = list(inputs)

        return self
