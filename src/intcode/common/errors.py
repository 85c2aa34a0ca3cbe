class IntcodeError(Exception):
    pass


class UnknownOpcodeError(IntcodeError):
    def __init__(self, opcode: int, address: int):
        super().__init__(f'Unknown opcode {opcode} at {address}')
        self.opcode = opcode
        self.address = address


class InvalidParameterModeError(IntcodeError):
    def __init__(self, mode: int, address: int):
        super().__init__(f'Invalid parameter mode {mode} at {address}')
        self.mode = mode
        self.address = address


class NegativeAddressError(IntcodeError):
    def __init__(self, address: int):
        super().__init__(f'Negative address {address}')
        self.address = address


class ImmediateWriteTargetError(IntcodeError):
    def __init__(self, address: int):
        super().__init__(f'Write through immediate parameter at {address}')
        self.address = address


class MalformedProgramTextError(IntcodeError):
    def __init__(self, line: int, column: int, message: str):
        super().__init__(f'Malformed program text at {line}:{column}: {message}')
        self.line = line
        self.column = column


class InputStarved(IntcodeError):
    def __init__(self, address: int):
        super().__init__(f'Machine is waiting for input at {address}')
        self.address = address


class CircuitError(IntcodeError):
    pass
