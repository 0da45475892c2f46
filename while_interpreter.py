#!/usr/bin/env python3
"""
===============================================================================
  WHILE: a small imperative language with a definite-assignment safety gate
===============================================================================

Install `ply` (Python-Lex-Yacc) and run

    while-interp programs/test.imp                 # executes test.imp
    while-interp programs/fact.imp --emit ast      # prints the syntax tree
    while-interp programs/unsafe.imp --emit analysis
    while-interp                                   # interactive session

-------------------------------------------------------------------------------
Language
-------------------------------------------------------------------------------
✔  Integer and boolean values
✔  Variables (upper-case words) and assignment  X := e
✔  Arithmetic  + - * /  and comparisons  > >= < <=
✔  if e then s else s endif,  while e do s endwhile,  s ; s,  skip

Before a program runs, a static analysis proves that no variable can be read
before it is written.  Programs that fail the proof are rejected without
running a single statement.

Conditions: a boolean selects by its own truth value; an integer condition
holds exactly when it equals zero.

Binary operators have no precedence and nest to the right, so `1 - 2 - 3`
means `1 - (2 - 3)`.  Use parentheses on the left operand to group.
"""
# =============================================================================
#  Imports
# =============================================================================
import argparse
import cmd
import enum
import logging
import operator
import sys
from collections import namedtuple
from dataclasses import dataclass, fields
from typing import Union

try:
    import ply.lex as lex
    import ply.yacc as yacc
except ImportError:
    sys.stderr.write("[FATAL] This module depends on the PLY package.\n"
                     "        pip install ply\n")
    raise

_log = logging.getLogger("while_interpreter")

# =============================================================================
#  0.  Errors  ────────────────────────────────────────────────────────────────
# =============================================================================

class WhileError(Exception):
    """Base class for every error raised by the interpreter."""


class ParseError(WhileError):
    """Source text does not match the WHILE grammar."""

    def __init__(self, message, line=None, column=None, offset=None):
        self.message = message
        self.line, self.column, self.offset = line, column, offset
        super().__init__(message)

    def __str__(self):
        if self.line is None:
            return self.message
        return f"line {self.line}, column {self.column}: {self.message}"


class EvalError(WhileError):
    """Arithmetic failure: division by zero or operands of the wrong kind."""

    def __init__(self, message, expression=None):
        self.message = message
        self.expression = expression
        self.statement = None
        super().__init__(message)

    def __str__(self):
        text = self.message
        if self.expression is not None:
            text += f" in '{self.expression}'"
        if self.statement is not None:
            text += f" while running '{self.statement}'"
        return text


class UnboundVariableError(WhileError):
    """A variable was read with no binding in the store.

    Programs accepted by `interpret` never raise this; seeing it there means
    the analyzer and the evaluator disagree.
    """

    def __init__(self, name):
        self.name = name
        super().__init__(f"variable '{name}' read before assignment")


def _locate(text, offset):
    """Map a character offset in *text* to a 1-based (line, column) pair."""
    line = text.count('\n', 0, offset) + 1
    column = offset - text.rfind('\n', 0, offset)
    return line, column

# =============================================================================
#  1.  Lexer  ──────────────────────────────────────────────────────────────────
# =============================================================================
reserved = {
    'if':       'IF',
    'then':     'THEN',
    'else':     'ELSE',
    'endif':    'ENDIF',
    'while':    'WHILE',
    'do':       'DO',
    'endwhile': 'ENDWHILE',
    'skip':     'SKIP',
    'true':     'TRUE',
    'false':    'FALSE',
}

tokens = [
    # Names / constants
    'VAR', 'NUMBER',

    # Operators (longest match wins: '>=' before '>')
    'PLUS', 'MINUS', 'TIMES', 'DIVIDE',
    'GE', 'LE', 'GT', 'LT',
    'ASSIGN',

    # Delimiters
    'LPAREN', 'RPAREN', 'SEMI',
] + list(reserved.values())

# Token regex -----------------------------------------------------------------

t_ignore          = ' \t\r'

t_PLUS            = r'\+'
t_MINUS           = r'-'
t_TIMES           = r'\*'
t_DIVIDE          = r'/'
t_GE              = r'>='
t_LE              = r'<='
t_GT              = r'>'
t_LT              = r'<'
t_ASSIGN          = r':='

t_LPAREN          = r'\('
t_RPAREN          = r'\)'
t_SEMI            = r';'

# Numbers ---------------------------------------------------------------------

def t_NUMBER(t):
    r'[0-9]+'
    t.value = int(t.value)
    return t

# Variables / keywords --------------------------------------------------------

def t_VAR(t):
    r'[A-Za-z]+'
    if t.value in reserved:
        t.type = reserved[t.value]
    elif not t.value.isupper():
        raise ParseError(f"unexpected word '{t.value}' "
                         "(variables are upper-case)", offset=t.lexpos)
    return t

# Track line numbers -----------------------------------------------------------

def t_newline(t):
    r'\n+'
    t.lexer.lineno += len(t.value)

# Error handling ---------------------------------------------------------------

def t_error(t):
    raise ParseError(f"illegal character '{t.value[0]}'", offset=t.lexpos)

lexer = lex.lex()

# =============================================================================
#  2.  AST  ────────────────────────────────────────────────────────────────────
# =============================================================================
#   Concrete syntax
#   ---------------
#   statement   ::= simple ';' statement | simple
#   simple      ::= VAR ':=' expression
#                 | 'if' expression 'then' statement 'else' statement 'endif'
#                 | 'while' expression 'do' statement 'endwhile'
#                 | 'skip'
#   expression  ::= operand binop expression | operand
#   operand     ::= '(' expression ')' | VAR | NUMBER | 'true' | 'false'
#   binop       ::= '+' | '-' | '*' | '/' | '>' | '>=' | '<' | '<='
#
#   Every node is an immutable dataclass.  str(node) renders concrete syntax,
#   node.walk() yields an indented tree dump.
# =============================================================================

# --- Values -------------------------------------------------------------------

@dataclass(frozen=True)
class IntVal:
    value: int

    def __str__(self):
        return str(self.value)


@dataclass(frozen=True)
class BoolVal:
    value: bool

    def __str__(self):
        return 'true' if self.value else 'false'


Value = Union[IntVal, BoolVal]


def _kind(value):
    return 'boolean' if isinstance(value, BoolVal) else 'integer'


class Bop(enum.Enum):
    PLUS   = '+'
    MINUS  = '-'
    TIMES  = '*'
    DIVIDE = '/'
    GT     = '>'
    GE     = '>='
    LT     = '<'
    LE     = '<='

    def __repr__(self):
        return f"Bop.{self.name}"

    def __str__(self):
        return self.value


def _divide(a, b):
    # truncate toward zero, unlike Python's floor division
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


_ARITHMETIC = {
    Bop.PLUS:   operator.add,
    Bop.MINUS:  operator.sub,
    Bop.TIMES:  operator.mul,
    Bop.DIVIDE: _divide,
}

_COMPARISON = {
    Bop.GT: operator.gt,
    Bop.GE: operator.ge,
    Bop.LT: operator.lt,
    Bop.LE: operator.le,
}


def apply_op(op: Bop, a: Value, b: Value) -> Value:
    """Apply *op* to two already-evaluated operands."""
    if not (isinstance(a, IntVal) and isinstance(b, IntVal)):
        raise EvalError(f"operator '{op.value}' expects integer operands, "
                        f"got {_kind(a)} and {_kind(b)}")
    if op in _COMPARISON:
        return BoolVal(_COMPARISON[op](a.value, b.value))
    if op is Bop.DIVIDE and b.value == 0:
        raise EvalError("division by zero")
    return IntVal(_ARITHMETIC[op](a.value, b.value))


def condition_holds(value: Value) -> bool:
    """Truth of an `if`/`while` condition: booleans as-is, integers by zero-test."""
    if isinstance(value, BoolVal):
        return value.value
    return value.value == 0


# --- Node base ----------------------------------------------------------------

class Node:
    def children(self):
        return [getattr(self, f.name) for f in fields(self)]

    def walk(self, indent=0):
        pad = '  '*indent
        yield f"{pad}{self.__class__.__name__}"
        for child in self.children():
            if isinstance(child, Node):
                yield from child.walk(indent+1)
            else:
                yield f"{pad}  {child!r}"


# --- Expressions --------------------------------------------------------------

class Expression(Node):
    pass


@dataclass(frozen=True)
class Var(Expression):
    name: str

    def eval(self, store):
        return store.lookup(self.name)

    def __str__(self):
        return self.name


@dataclass(frozen=True)
class Literal(Expression):
    value: Value

    def __post_init__(self):
        # accept plain Python values: Literal(5), Literal(True)
        if isinstance(self.value, bool):
            object.__setattr__(self, 'value', BoolVal(self.value))
        elif isinstance(self.value, int):
            object.__setattr__(self, 'value', IntVal(self.value))
        elif not isinstance(self.value, (IntVal, BoolVal)):
            raise TypeError(f"Literal expects an integer or boolean, got {self.value!r}")

    def eval(self, store):
        return self.value

    def __str__(self):
        return str(self.value)


@dataclass(frozen=True)
class BinaryOp(Expression):
    op: Bop
    left: Expression
    right: Expression

    def eval(self, store):
        a, b = self.left.eval(store), self.right.eval(store)
        try:
            return apply_op(self.op, a, b)
        except EvalError as err:
            if err.expression is None:
                err.expression = self
            raise

    def __str__(self):
        # the grammar only accepts a binary operation on the right
        left = f"({self.left})" if isinstance(self.left, BinaryOp) else str(self.left)
        return f"{left} {self.op.value} {self.right}"


# --- Statements ---------------------------------------------------------------

class Statement(Node):
    def _eval_expr(self, expr, store):
        try:
            return expr.eval(store)
        except EvalError as err:
            if err.statement is None:
                err.statement = self
            raise


@dataclass(frozen=True)
class Assign(Statement):
    name: str
    expr: Expression

    def eval(self, store):
        return store.update(self.name, self._eval_expr(self.expr, store))

    def __str__(self):
        return f"{self.name} := {self.expr}"


@dataclass(frozen=True)
class If(Statement):
    cond: Expression
    then: Statement
    els: Statement

    def eval(self, store):
        if condition_holds(self._eval_expr(self.cond, store)):
            return self.then.eval(store)
        return self.els.eval(store)

    def __str__(self):
        return f"if {self.cond} then {self.then} else {self.els} endif"


@dataclass(frozen=True)
class While(Statement):
    cond: Expression
    body: Statement

    def eval(self, store):
        while condition_holds(self._eval_expr(self.cond, store)):
            store = self.body.eval(store)
        return store

    def __str__(self):
        return f"while {self.cond} do {self.body} endwhile"


@dataclass(frozen=True)
class Sequence(Statement):
    first: Statement
    second: Statement

    # a parsed program is a right-nested chain as long as the program itself
    def _spine(self):
        links, node = [], self
        while isinstance(node, Sequence):
            links.append(node.first)
            node = node.second
        links.append(node)
        return links

    def eval(self, store):
        for stmt in flatten(self):
            store = stmt.eval(store)
        return store

    def walk(self, indent=0):
        yield f"{'  '*indent}Sequence"
        for stmt in flatten(self):
            yield from stmt.walk(indent+1)

    def __eq__(self, other):
        if other.__class__ is not self.__class__:
            return NotImplemented
        return self._spine() == other._spine()

    def __hash__(self):
        return hash(tuple(self._spine()))

    def __repr__(self):
        links = self._spine()
        heads = ''.join(f"Sequence(first={s!r}, second=" for s in links[:-1])
        return heads + repr(links[-1]) + ')'*(len(links)-1)

    def __str__(self):
        return '; '.join(str(stmt) for stmt in flatten(self))


@dataclass(frozen=True)
class Skip(Statement):
    def eval(self, store):
        return store

    def __str__(self):
        return 'skip'


def sequence(*stmts):
    """Chain statements into a right-nested Sequence."""
    if not stmts:
        return Skip()
    result = stmts[-1]
    for stmt in reversed(stmts[:-1]):
        result = Sequence(stmt, result)
    return result


def flatten(stmt):
    """Top-level statements of a Sequence chain, in execution order."""
    result, pending = [], [stmt]
    while pending:
        stmt = pending.pop()
        if isinstance(stmt, Sequence):
            pending.append(stmt.second)
            pending.append(stmt.first)
        else:
            result.append(stmt)
    return result

# =============================================================================
#  3.  Store  ──────────────────────────────────────────────────────────────────
# =============================================================================
_Binding = namedtuple('_Binding', 'name value next')


class Store:
    """Persistent variable store.

    A chain of bindings, newest first.  `update` prepends and never touches
    the chain it extends, so every Store value stays valid forever.  Older
    bindings of a re-assigned name stay in the chain, shadowed.
    """

    __slots__ = ('_head',)

    def __init__(self, _head=None):
        self._head = _head

    @classmethod
    def from_items(cls, items):
        store = cls()
        for name, value in items:
            store = store.update(name, value)
        return store

    def update(self, name, value):
        return Store(_Binding(name, value, self._head))

    def lookup(self, name):
        binding = self._head
        while binding is not None:
            if binding.name == name:
                return binding.value
            binding = binding.next
        raise UnboundVariableError(name)

    def bindings(self):
        """Raw bindings, newest first, shadowed ones included."""
        binding = self._head
        while binding is not None:
            yield binding.name, binding.value
            binding = binding.next

    def keys(self):
        return frozenset(name for name, _ in self.bindings())

    def items(self):
        latest = {}
        for name, value in self.bindings():
            latest.setdefault(name, value)
        return sorted(latest.items())

    def to_dict(self):
        return dict(self.items())

    def __contains__(self, name):
        return any(bound == name for bound, _ in self.bindings())

    def __len__(self):
        return len(self.keys())

    def __eq__(self, other):
        if not isinstance(other, Store):
            return NotImplemented
        return self.items() == other.items()

    __hash__ = None

    def __repr__(self):
        return f"Store({self.to_dict()!r})"

    def __str__(self):
        return '{' + ', '.join(f"{name}: {value}" for name, value in self.items()) + '}'

# =============================================================================
#  4.  Evaluator  ──────────────────────────────────────────────────────────────
# =============================================================================

def evaluate(store: Store, expr: Expression) -> Value:
    return expr.eval(store)


def execute(store: Store, program: Statement) -> Store:
    """Run *program* from *store* with no safety check.

    Reading an unbound variable raises UnboundVariableError.
    """
    return program.eval(store)

# =============================================================================
#  5.  Definite-assignment analysis  ──────────────────────────────────────────
# =============================================================================
#   unsafe(s)   variables s may read before s itself has written them
#   defined(s)  variables bound after every terminating run of s
#
#   If       defined = defined(then) & defined(els)   (only one branch runs)
#   While    defined = {}                              (body may never run)
#   Sequence unsafe  = unsafe(s1) | (unsafe(s2) - defined(s1))
# =============================================================================
Analysis = namedtuple('Analysis', 'unsafe defined')

_NOTHING = frozenset()


class SafetyAnalyzer:
    def visit(self, n):
        meth = 'v_' + n.__class__.__name__
        return getattr(self, meth, self.generic)(n)

    def generic(self, n):
        raise TypeError(f"not a WHILE node: {n!r}")

    # expressions -> frozenset of names read
    def v_Var(self, n: Var):
        return frozenset([n.name])

    def v_Literal(self, n: Literal):
        return _NOTHING

    def v_BinaryOp(self, n: BinaryOp):
        return self.visit(n.left) | self.visit(n.right)

    # statements -> Analysis
    def v_Skip(self, n: Skip):
        return Analysis(_NOTHING, _NOTHING)

    def v_Assign(self, n: Assign):
        return Analysis(self.visit(n.expr), frozenset([n.name]))

    def v_If(self, n: If):
        then, els = self.visit(n.then), self.visit(n.els)
        return Analysis(self.visit(n.cond) | then.unsafe | els.unsafe,
                        then.defined & els.defined)

    def v_While(self, n: While):
        body = self.visit(n.body)
        return Analysis(self.visit(n.cond) | body.unsafe, _NOTHING)

    def v_Sequence(self, n: Sequence):
        unsafe, defined = _NOTHING, _NOTHING
        for stmt in flatten(n):
            a = self.visit(stmt)
            unsafe |= a.unsafe - defined
            defined |= a.defined
        return Analysis(unsafe, defined)


def reads(expr: Expression) -> frozenset:
    return SafetyAnalyzer().visit(expr)


def analyze(stmt: Statement) -> Analysis:
    return SafetyAnalyzer().visit(stmt)


def maybe_read_unsafe(stmt: Statement) -> frozenset:
    return analyze(stmt).unsafe


def definitely_defined(stmt: Statement) -> frozenset:
    return analyze(stmt).defined


def check(stmt: Statement, defined=()) -> frozenset:
    """Names *stmt* may read unbound when *defined* are already bound."""
    return maybe_read_unsafe(stmt) - frozenset(defined)


def is_safe(stmt: Statement) -> bool:
    return not maybe_read_unsafe(stmt)

# =============================================================================
#  6.  Safety gate  ────────────────────────────────────────────────────────────
# =============================================================================

def interpret(program: Statement):
    """Run *program* from the empty store if it is proven safe.

    Returns the final Store, or None when the analysis rejects the program;
    a rejected program is never started.  EvalError propagates.
    """
    unsafe = maybe_read_unsafe(program)
    if unsafe:
        _log.info("rejected: %s may be read before assignment",
                  ', '.join(sorted(unsafe)))
        return None
    _log.debug("accepted; running from the empty store")
    return execute(Store(), program)

# =============================================================================
#  7.  Parser rules (PLY)  ─────────────────────────────────────────────────────
# =============================================================================

# Statements ------------------------------------------------------------------

def p_statement_sequence(p):
    """statement : simple_statement SEMI statement"""
    p[0] = Sequence(p[1], p[3])


def p_statement_simple(p):
    """statement : simple_statement"""
    p[0] = p[1]


def p_simple_statement(p):
    """simple_statement : assign_statement
                        | if_statement
                        | while_statement
                        | skip_statement"""
    p[0] = p[1]


def p_assign_statement(p):
    """assign_statement : VAR ASSIGN expression"""
    p[0] = Assign(p[1], p[3])


def p_if_statement(p):
    """if_statement : IF expression THEN statement ELSE statement ENDIF"""
    p[0] = If(p[2], p[4], p[6])


def p_while_statement(p):
    """while_statement : WHILE expression DO statement ENDWHILE"""
    p[0] = While(p[2], p[4])


def p_skip_statement(p):
    """skip_statement : SKIP"""
    p[0] = Skip()

# Expressions -----------------------------------------------------------------

def p_expression_binary(p):
    """expression : operand binop expression"""
    p[0] = BinaryOp(p[2], p[1], p[3])


def p_expression_operand(p):
    """expression : operand"""
    p[0] = p[1]


def p_binop(p):
    """binop : PLUS
             | MINUS
             | TIMES
             | DIVIDE
             | GT
             | GE
             | LT
             | LE"""
    p[0] = Bop(p[1])


def p_operand_paren(p):
    """operand : LPAREN expression RPAREN"""
    p[0] = p[2]


def p_operand_var(p):
    """operand : VAR"""
    p[0] = Var(p[1])


def p_operand_number(p):
    """operand : NUMBER"""
    p[0] = Literal(IntVal(p[1]))


def p_operand_bool(p):
    """operand : TRUE
               | FALSE"""
    p[0] = Literal(BoolVal(p[1] == 'true'))

# Error management ------------------------------------------------------------

def p_error(p):
    if p is None:
        raise ParseError("unexpected end of input")
    raise ParseError(f"unexpected token '{p.value}'", offset=p.lexpos)

_parser = yacc.yacc(debug=False, write_tables=False)


def parse(source: str) -> Statement:
    """Parse WHILE source text; raises ParseError at the first error."""
    try:
        program = _parser.parse(source, lexer=lexer.clone())
    except ParseError as err:
        if err.line is not None:
            raise
        offset = len(source) if err.offset is None else err.offset
        line, column = _locate(source, offset)
        raise ParseError(err.message, line, column, offset) from None
    if _log.isEnabledFor(logging.DEBUG):
        _log.debug("parsed %d top-level statement(s)", len(flatten(program)))
    return program

# =============================================================================
#  8.  Front end  ──────────────────────────────────────────────────────────────
# =============================================================================

def run(program, out=None):
    """Interpret *program* and print the final store; False if rejected."""
    out = out or sys.stdout
    store = interpret(program)
    if store is None:
        names = ', '.join(sorted(maybe_read_unsafe(program)))
        print(f"Program rejected: may read before assignment: {names}", file=out)
        return False
    print("Output Store:", file=out)
    print(store, file=out)
    return True


def run_file(path, out=None):
    with open(path) as f:
        return run(parse(f.read()), out)


def analysis_report(program):
    """Per top-level statement unsafe/defined sets, then the verdict."""
    lines = []
    for stmt in flatten(program):
        a = analyze(stmt)
        lines.append(f"{stmt}: unsafe={sorted(a.unsafe)}, defined={sorted(a.defined)}")
    whole = analyze(program)
    verdict = 'safe' if not whole.unsafe else 'UNSAFE'
    lines.append(f"Program: unsafe={sorted(whole.unsafe)}, "
                 f"defined={sorted(whole.defined)} -> {verdict}")
    return lines


class WhileRepl(cmd.Cmd):
    """Interactive session; the store carries over between lines."""

    intro = 'WHILE interpreter. Type help or ? to list commands.\n'
    prompt = 'while> '

    def __init__(self, stdin=None, stdout=None):
        super().__init__(stdin=stdin, stdout=stdout)
        self.store = Store()

    def _say(self, text):
        self.stdout.write(text + '\n')

    def default(self, line):
        try:
            program = parse(line)
        except ParseError as e:
            self._say(f"Parse error: {e}")
            return
        unsafe = check(program, self.store.keys())
        if unsafe:
            self._say(f"Rejected: may read before assignment: {', '.join(sorted(unsafe))}")
            return
        try:
            self.store = execute(self.store, program)
        except EvalError as e:
            self._say(f"Error: {e}")
            return
        self._say(str(self.store))

    def parseline(self, line):
        command, arg, line = super().parseline(line)
        # an upper-case first word followed by more text is a statement
        # (`EOF := 1`), not the EOF command
        if command and command.isupper() and arg:
            return None, None, line
        return command, arg, line

    def emptyline(self):
        pass

    def do_store(self, arg):
        """Show the current store."""
        self._say(str(self.store))

    def do_reset(self, arg):
        """Forget every variable."""
        self.store = Store()
        self._say('{}')

    def do_EOF(self, arg):
        """Leave the session (Ctrl-D)."""
        self._say('')
        return True


def _configure_logging(verbosity):
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("[%(name)s] %(levelname)s: %(message)s"))
    _log.handlers[:] = [handler]
    _log.setLevel(level)

# =============================================================================
#  9.  CLI  ───────────────────────────────────────────────────────────────────
# =============================================================================

def main(argv=None):
    ap = argparse.ArgumentParser(prog='while-interp', description="WHILE interpreter")
    ap.add_argument('file', nargs='?',
                    help="WHILE source file to execute (omit for an interactive session)")
    ap.add_argument('--emit', choices=['ast', 'analysis', 'source'],
                    help="print an intermediate form instead of executing")
    ap.add_argument('--unchecked', action='store_true',
                    help="skip the definite-assignment check and run anyway")
    ap.add_argument('-v', '--verbose', action='count', default=0,
                    help="-v for info, -vv for debug logging on stderr")
    args = ap.parse_args(argv)
    _configure_logging(args.verbose)

    if args.file is None:
        WhileRepl().cmdloop()
        return 0

    try:
        with open(args.file) as f:
            code = f.read()
    except OSError as e:
        print(f"Cannot read {args.file}: {e.strerror}", file=sys.stderr)
        return 1

    try:
        program = parse(code)
    except ParseError as e:
        print(f"{args.file}: {e}", file=sys.stderr)
        return 1

    if args.emit == 'ast':
        print('\n'.join(program.walk()))
        return 0
    if args.emit == 'analysis':
        print('\n'.join(analysis_report(program)))
        return 0
    if args.emit == 'source':
        print(program)
        return 0

    try:
        if args.unchecked:
            store = execute(Store(), program)
        else:
            store = interpret(program)
    except EvalError as e:
        print(f"Runtime error: {e}", file=sys.stderr)
        return 1
    except UnboundVariableError as e:
        if not args.unchecked:
            raise
        print(f"Runtime error: {e}", file=sys.stderr)
        return 1

    if store is None:
        names = ', '.join(sorted(maybe_read_unsafe(program)))
        print(f"Program rejected: may read before assignment: {names}", file=sys.stderr)
        return 2

    print("Output Store:")
    print(store)
    return 0

# =============================================================================
if __name__ == '__main__':
    sys.exit(main())
