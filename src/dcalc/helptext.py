'''
Help text for every command, keyed by command character.
'''

UNKNOWN = 'Unknown command'

REGISTER_NOTE = ('Note: Registers are indexed by their Unicode codepoint, '
                 'which can be any single character. They are their own '
                 'fully-fledged, freestanding stacks. All register operations '
                 'take a register operand that is a single character directly '
                 'after it.')

ARITHMETIC = 'Exactly what you expect. The first operand is popped first.'

COMMANDS = {
    'v': 'Prints the value at the top of the stack without popping it.',
    'V': 'Prints the whole stack including indices. Index `0` represents the '
         'top of the stack.',
    'p': 'Same as `v` but pops the value from the stack before printing it.',
    '+': ARITHMETIC,
    '-': ARITHMETIC,
    '*': ARITHMETIC,
    '/': ARITHMETIC,
    '%': 'Pops `a`, then pops `b`, then pushes `b % a`.',
    '"': 'A combination of `/` and `%`. Same argument order as `%`, but '
         'pushes the quotient before pushing the remainder aka modulus.',
    '^': 'Pops `a`, then pops `b`, then pushes `b ^ a`.',
    '~': 'Pops `a`, then pushes `-a`. In other words, negates the value at '
         'the top of the stack.',
    'c': 'Clears the stack.',
    'd': 'Pops `a`, then pushes `a` twice.',
    'r': 'Swaps the two values at the top of the stack.',
    'R': 'Pops `a`, then rotates the top `a` values of the stack. A positive '
         '`a` raises the value `a - 1` places down to the top, a negative '
         '`a` sinks the top value `a - 1` places.',
    'i': 'Pops `a`, then sets the input radix to `a`. The input radix '
         'determines how numbers are parsed. In radices less than or equal to '
         '10, all numbers can be input as normal. In radices greater than 10, '
         'the number must start with a digit (0 to 9), but you can prefix the '
         'number with `0` and it will result in the same value. For example, '
         'in base 16, trying to input `c2` as a number would run the `c` '
         'command, then input the number `2`, so instead you should input '
         '`0c2`.',
    'I': 'Pushes the input radix.',
    'z': 'Pushes the current length of the stack, not including this value '
         'that is about to be pushed.',
    '?': '(Args <command>) Gets help for a command.',
}

REGISTERS = {
    's': '(Args <reg>) Pops a value from the global stack and pushes it to '
         'the specified register.',
    'l': '(Args <reg>) Pops a value from the specified register and pushes it '
         'to the global stack.',
    'S': '(Args <reg>) Peeks a value from the stack without popping it and '
         'pushes it to the specified register.',
    'L': '(Args <reg>) Peeks a value from the specified register and pushes '
         'it to the global stack.',
    '&': '(Args <reg><operation>) Performs `operation` inside the specified '
         'register. Nested register operations such as `&asb` are not '
         'permitted.',
}


def describe(command):
    '''
    Return help text for command, UNKNOWN if there's no such command.
    '''
    if command in REGISTERS:
        return REGISTERS[command] + '\n' + REGISTER_NOTE
    return COMMANDS.get(command, UNKNOWN)


def commands():
    '''
    Return every documented command, in the order documented.
    '''
    return [*COMMANDS, *REGISTERS]
