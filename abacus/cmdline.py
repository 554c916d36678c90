"""
This is an interactive calculator.

{0}

For example:

    abacus -e "2 + 3 * 4"

prints 14 and exits, while plain

    abacus

starts an interactive session. Assign variables with `=`, as in `x = 5`.
Within a session, `?` lists the builtin functions and your variables,
`clear` forgets all variables, and `quit` (or end-of-input) leaves.

    abacus -h

will explain all the arguments.
"""
import sys, argparse

from .front_end import MAX_DEPTH, depth_ceiling

PROMPT = ">> "
QUIT = frozenset(["quit", "exit"])

def _depth(text:str) -> int:
	ceiling = depth_ceiling()
	try: depth = int(text)
	except ValueError: raise argparse.ArgumentTypeError("%r is not a whole number" % text) from None
	if not 1 <= depth <= ceiling:
		raise argparse.ArgumentTypeError("must be between 1 and %d" % ceiling)
	return depth

parser = argparse.ArgumentParser(
	prog="abacus",
	description="Interactive calculator with variables and builtin functions.",
)
parser.add_argument('-e', "--expression", action="append", help="Evaluate this, print the result, and exit. May be repeated.")
parser.add_argument('-v', "--verbose", action="count", help="Show the tokens and the parse tree of each statement.")
parser.add_argument('-d', "--max-depth", type=_depth, default=MAX_DEPTH, help="How deeply expressions may nest (default %(default)s).")
parser.add_argument('-k', "--constants", action="store_true", help="Start with pi, e, and tau already defined.")

def render(value:float) -> str:
	if value.is_integer() and abs(value) < 1e16:
		return str(int(value))
	return repr(value)

def _make_session(args):
	from .diagnostics import Report
	from .executive import Session
	report = Report(verbose=args.verbose)
	return Session(report, max_depth=args.max_depth, constants=args.constants)

def _run_one(session, text:str, label:str) -> bool:
	value = session.execute(text, label)
	if value is None:
		session.report.complain_to_console()
		session.report.reset()
		return False
	print("-->", render(value))
	return True

def _help(session):
	from .primitive import BUILTINS
	print(__doc__.strip().format(parser.format_usage()))
	print()
	print("Builtin functions:")
	for name, primitive in sorted(BUILTINS.items()):
		params = ", ".join("xyz"[:primitive.arity])
		print("    %s(%s) -- %s" % (name, params, primitive.doc))
	print()
	if len(session.env):
		print("Variables:")
		for name, value in session.env.items():
			print("    %s = %s" % (name, render(value)))
	else:
		print("No variables are defined.")

def repl(session, lines=None) -> int:
	""" Read-evaluate-print until quit or end of input. Answer how many statements failed. """
	interactive = lines is None
	failures = 0
	count = 0
	while True:
		if interactive:
			try: line = input(PROMPT)
			except EOFError:
				print()
				break
		else:
			try: line = next(lines)
			except StopIteration: break
		text = line.strip()
		if not text: continue
		if text.lower() in QUIT: break
		if text == "?": _help(session)
		elif text.lower() == "clear":
			session.clear()
			print("All variables forgotten.")
		else:
			count += 1
			if not _run_one(session, text, "<line %d>" % count): failures += 1
	return failures

def run(args):
	session = _make_session(args)
	if args.expression:
		failures = 0
		for i, text in enumerate(args.expression, 1):
			if not _run_one(session, text, "<expression %d>" % i): failures += 1
		return 1 if failures else 0
	if sys.stdin.isatty():
		repl(session)
	else:
		return 1 if repl(session, iter(sys.stdin)) else 0
	return 0

def main():
	exit(run(parser.parse_args()))
