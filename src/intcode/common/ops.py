# Opcodes
ADD = 1     # P1 +  P2 -> P3
MUL = 2     # P1 *  P2 -> P3
INP = 3     # input -> P1
OUT = 4     # P1 -> output
JIT = 5     # if P1 .ne 0 jmp P2
JIF = 6     # if P1 .eq 0 jmp P2
SLT = 7     # P1 .lt P2 -> P3
SEQ = 8     # P1 .eq P2 -> P3
ARB = 9     # RB + P1 -> RB
HLT = 99

# Parameter modes
POSITION = 0    # M[P]
IMMEDIATE = 1   # P
RELATIVE = 2    # M[RB + P]

# Encoded parameters following the opcode word
PARAM_COUNT = {
    ADD: 3,
    MUL: 3,
    INP: 1,
    OUT: 1,
    JIT: 2,
    JIF: 2,
    SLT: 3,
    SEQ: 3,
    ARB: 1,
    HLT: 0
}
