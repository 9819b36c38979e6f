#! /usr/bin/env python
import doctest
import io
import unittest
from contextlib import redirect_stdout
from enum import Enum, IntEnum
from types import SimpleNamespace

import dollar_getopt
from dollar_getopt import (
    ArgumentError,
    BooleanValueError,
    ConversionError,
    EmptyArgumentsError,
    IllegalArgumentError,
    MissingValueError,
    Syntax,
    UnrecognizedOptionError,
    UnsupportedDestinationError,
    Var,
    attr,
    callback,
    config,
    getopt,
    mapping,
    parse,
    sequence,
)
from dollar_getopt import (
    bundling,
    classify,
    configuration,
    declaration,
    destination,
    parser,
    result,
    syntax,
)


def load_tests(_, tests, __):

    parser.TESTING = True
    for mod in [
        bundling,
        classify,
        configuration,
        declaration,
        destination,
        parser,
        result,
        syntax,
    ]:
        tests.addTests(doctest.DocTestSuite(mod))
    return tests


class Timeout(Enum):
    no = 0
    yes = 1


class Level(IntEnum):
    low = 0
    high = 1


class Mode(str, Enum):
    fast = "f"
    slow = "s"


def parsed(args, *opts, **kwargs):
    args = list(args)
    getopt(args, *opts, **kwargs)
    return args


class BooleanTest(unittest.TestCase):
    def test_long_and_short(self):
        for arg in ["--verbose", "-v", "--VERBOSE"]:
            verbose = Var(False)
            self.assertEqual(parsed(["prog", arg], "verbose|v", verbose), ["prog"])
            self.assertTrue(verbose.value, arg)

    def test_value_is_rejected(self):
        for arg in ["--verbose=yes", "--verbose=", "-v=", "-vx", "-v=true"]:
            verbose = Var(False)
            with self.assertRaises(BooleanValueError, msg=arg):
                getopt(["prog", arg], "verbose|v", verbose)
            self.assertFalse(verbose.value)

    def test_next_token_is_not_a_value(self):
        verbose = Var(False)
        self.assertEqual(
            parsed(["prog", "--verbose", "true"], "verbose", verbose), ["prog", "true"]
        )
        self.assertTrue(verbose.value)


class ScalarTest(unittest.TestCase):
    accepted = [
        ["--timeout=%s"],
        ["--timeout", "%s"],
        ["-t%s"],
        ["-t=%s"],
        ["-t", "%s"],
    ]

    def check_accepted(self, initial, text, expected):
        for form in self.accepted:
            timeout = Var(initial)
            args = ["prog"] + [f % text if "%s" in f else f for f in form]
            self.assertEqual(parsed(args, "t|timeout", timeout), ["prog"], args)
            self.assertEqual(timeout.value, expected, args)

    def test_integer(self):
        self.check_accepted(0, "5", 5)
        self.check_accepted(0, "-5", -5)

    def test_float(self):
        self.check_accepted(0.0, ".1", 0.1)

    def test_string(self):
        self.check_accepted("", "never", "never")

    def test_enumeration(self):
        self.check_accepted(Timeout.no, "yes", Timeout.yes)

    def test_enumeration_names_are_exact(self):
        color = Var(Timeout.no)
        with self.assertRaises(ConversionError):
            getopt(["prog", "--timeout=YES"], "timeout", color)
        self.assertEqual(color.value, Timeout.no)

    def test_int_enumeration(self):
        self.check_accepted(Level.low, "high", Level.high)
        level = Var(Level.low)
        with self.assertRaises(ConversionError):
            getopt(["prog", "--level", "1"], "level", level)
        self.assertIs(level.value, Level.low)

    def test_str_enumeration(self):
        mode = Var(Mode.fast)
        getopt(["prog", "--mode", "slow"], "mode", mode)
        self.assertIs(mode.value, Mode.slow)
        with self.assertRaises(ConversionError):
            getopt(["prog", "--mode", "s"], "mode", mode)

    def test_malformed_numbers(self):
        for text in [" 5", "5 ", "1_000", "٥"]:
            length = Var(24)
            with self.assertRaises(ConversionError, msg=text):
                getopt(["prog", "--length", text], "length", length)
            self.assertEqual(length.value, 24)
        with self.assertRaises(ConversionError):
            getopt(["prog", "--ratio= 0.5"], "ratio", Var(1.0))

    def test_conversion_error(self):
        length = Var(24)
        with self.assertRaises(ConversionError) as cm:
            getopt(["prog", "--length=five"], "length", length)
        self.assertEqual(cm.exception.value, "five")
        self.assertIsInstance(cm.exception.exception, ValueError)
        self.assertEqual(length.value, 24)

    def test_missing_value(self):
        with self.assertRaises(MissingValueError) as cm:
            getopt(["prog", "--length"], "length", Var(24))
        self.assertEqual(cm.exception.missing, "--length")

    def test_single_letter_long_options_are_rejected(self):
        for args in [
            ["prog", "--t", "5"],
            ["prog", "--t=5"],
            ["prog", "--t5"],
            ["prog", "--timeout5"],
        ]:
            timeout = Var(0)
            with self.assertRaises(UnrecognizedOptionError, msg=args):
                getopt(args, "t|timeout", timeout)
            self.assertEqual(timeout.value, 0)

    def test_multi_letter_short_option_is_attached_value(self):
        timeout = Var("")
        getopt(["prog", "-timeout=never"], "t|timeout", timeout)
        self.assertEqual(timeout.value, "imeout=never")

        timeout = Var("")
        self.assertEqual(
            parsed(["prog", "-timeout", "never"], "t|timeout", timeout),
            ["prog", "never"],
        )
        self.assertEqual(timeout.value, "imeout")

        timeout = Var("")
        getopt(["prog", "-timeoutnever"], "t|timeout", timeout)
        self.assertEqual(timeout.value, "imeoutnever")

        with self.assertRaises(ConversionError):
            getopt(["prog", "-timeout=1"], "t|timeout", Var(0))

    def test_attribute_destination(self):
        options = SimpleNamespace(length=24, file="file.dat")
        args = parsed(
            ["prog", "--length", "5", "--file=dat.file"],
            "length",
            attr(options, "length"),
            "file",
            attr(options, "file"),
        )
        self.assertEqual(args, ["prog"])
        self.assertEqual(options.length, 5)
        self.assertEqual(options.file, "dat.file")


class NoSpaceOnlyForShortNumericOptionsTest(unittest.TestCase):
    def test_numeric(self):
        for args in [["prog", "-t5"], ["prog", "-t=5"], ["prog", "-t", "5"]]:
            timeout = Var(0)
            getopt(
                args, config.no_space_only_for_short_numeric_options, "t|timeout", timeout
            )
            self.assertEqual(timeout.value, 5, args)

    def test_string(self):
        for args in [["prog", "-t=never"], ["prog", "-t", "never"]]:
            timeout = Var("")
            getopt(
                args, config.no_space_only_for_short_numeric_options, "t|timeout", timeout
            )
            self.assertEqual(timeout.value, "never", args)

        for args in [
            ["prog", "-tnever"],
            ["prog", "-timeout=never"],
            ["prog", "-timeout", "never"],
        ]:
            timeout = Var("")
            with self.assertRaises(UnrecognizedOptionError, msg=args):
                getopt(
                    args,
                    config.no_space_only_for_short_numeric_options,
                    "t|timeout",
                    timeout,
                )
            self.assertEqual(timeout.value, "", args)

    def test_sequence_is_not_numeric(self):
        with self.assertRaises(UnrecognizedOptionError):
            getopt(
                ["prog", "-n1"],
                config.no_space_only_for_short_numeric_options,
                "n",
                sequence([], int),
            )

    def test_boolean(self):
        verbose = Var(False)
        getopt(
            ["prog", "-v"], config.no_space_only_for_short_numeric_options, "v", verbose
        )
        self.assertTrue(verbose.value)

    def test_directive_can_be_reverted(self):
        name = Var("")
        getopt(
            ["prog", "-nfoo"],
            config.no_space_only_for_short_numeric_options,
            config.no_space_for_short_options,
            "n",
            name,
        )
        self.assertEqual(name.value, "foo")


class IncrementalTest(unittest.TestCase):
    def test_counts_occurrences(self):
        paranoid = Var(2)
        args = parsed(
            ["prog", "--paranoid", "--paranoid", "--paranoid"], "paranoid+", paranoid
        )
        self.assertEqual(paranoid.value, 5)
        self.assertEqual(args, ["prog"])

    def test_does_not_take_a_value(self):
        paranoid = Var(0)
        args = parsed(["prog", "--paranoid", "42", "--paranoid"], "paranoid+", paranoid)
        self.assertEqual(paranoid.value, 2)
        self.assertEqual(args, ["prog", "42"])

    def test_inline_value_is_ignored(self):
        paranoid = Var(0)
        getopt(["prog", "--paranoid=7"], "paranoid+", paranoid)
        self.assertEqual(paranoid.value, 1)

    def test_short_and_float(self):
        level = Var(0.5)
        getopt(["prog", "-l", "--level"], "level|l+", level)
        self.assertEqual(level.value, 2.5)

    def test_requires_numeric_destination(self):
        for target in [Var(""), Var(False), []]:
            with self.assertRaises(UnsupportedDestinationError):
                getopt(["prog", "--paranoid"], "paranoid+", target)


class SequenceTest(unittest.TestCase):
    def test_array_separator(self):
        for args in [
            ["prog", "-nfoo,bar,baz"],
            ["prog", "-n=foo,bar,baz"],
            ["prog", "-n", "foo,bar,baz"],
            ["prog", "--name", "foo,bar,baz"],
            ["prog", "--name=foo,bar,baz"],
        ]:
            names = []
            self.assertEqual(parsed(args, "name|n", names), ["prog"])
            self.assertEqual(names, ["foo", "bar", "baz"], args)

    def test_appends_across_occurrences(self):
        output_files = []
        getopt(
            ["prog", "--output=myfile.txt", "--output", "yourfile.txt"],
            "output",
            output_files,
        )
        self.assertEqual(output_files, ["myfile.txt", "yourfile.txt"])

    def test_element_type(self):
        numbers = [0]
        getopt(["prog", "--number=1,2", "--number", "3"], "number", numbers)
        self.assertEqual(numbers, [0, 1, 2, 3])

        flags = []
        getopt(["prog", "--flag=true,False"], "flag", sequence(flags, bool))
        self.assertEqual(flags, [True, False])

    def test_conversion_error(self):
        numbers = []
        with self.assertRaises(ConversionError):
            getopt(["prog", "--number=1,x"], "number", sequence(numbers, int))
        self.assertEqual(numbers, [])

    def test_empty_value(self):
        for args in [["prog", "--name="], ["prog", "--name", ""]]:
            names = ["foo"]
            self.assertEqual(parsed(args, "name", names), ["prog"])
            self.assertEqual(names, ["foo"], args)

    def test_custom_separator(self):
        names = []
        getopt(["prog", "--name=a;b"], "name", names, syntax=Syntax(array_sep=";"))
        self.assertEqual(names, ["a", "b"])


class MappingTest(unittest.TestCase):
    def test_array_separator(self):
        for args in [
            ["prog", "-tfoo=0,bar=1,baz=2"],
            ["prog", "-t=foo=0,bar=1,baz=2"],
            ["prog", "-t", "foo=0,bar=1,baz=2"],
            ["prog", "--tune", "foo=0,bar=1,baz=2"],
            ["prog", "--tune=foo=0,bar=1,baz=2"],
        ]:
            parameters = mapping({}, value_type=int)
            self.assertEqual(parsed(args, "tune|t", parameters), ["prog"])
            self.assertEqual(parameters.target, {"foo": 0, "bar": 1, "baz": 2}, args)

    def test_inserts_across_occurrences(self):
        tuning = {"alpha": 0.0}
        getopt(["prog", "--tune=alpha=0.5", "--tune", "beta=0.6"], "tune", tuning)
        self.assertEqual(tuning, {"alpha": 0.5, "beta": 0.6})

    def test_strings(self):
        pairs = {}
        getopt(["prog", "--opt=k1=v1,k2=v2"], "opt", pairs)
        self.assertEqual(pairs, {"k1": "v1", "k2": "v2"})

    def test_value_may_contain_assign_char(self):
        pairs = {}
        getopt(["prog", "--define", "x=a=b"], "define", pairs)
        self.assertEqual(pairs, {"x": "a=b"})

    def test_illegal_argument(self):
        for value in ["k1", "k1=v1,k2", "=v"]:
            with self.assertRaises(IllegalArgumentError, msg=value):
                getopt(["prog", "--opt", value], "opt", {})

    def test_key_conversion_error(self):
        with self.assertRaises(ConversionError):
            getopt(["prog", "--opt=x=1"], "opt", mapping({}, int, int))

    def test_empty_value(self):
        tuning = {"alpha": 0.5}
        self.assertEqual(parsed(["prog", "--tune="], "tune", tuning), ["prog"])
        self.assertEqual(tuning, {"alpha": 0.5})

    def test_multi_letter_short_option(self):
        tuning = {"string": 1.0}
        getopt(["prog", "-timeoutstring=1.0"], "t|timeout", tuning)
        self.assertEqual(tuning, {"string": 1.0, "imeoutstring": 1.0})


class CallbackTest(unittest.TestCase):
    def test_option_name(self):
        verbosity = Var(1)

        def handler(option):
            if option == "quiet":
                verbosity.set(0)
            else:
                self.assertEqual(option, "verbose")
                verbosity.set(2)

        getopt(["prog", "--quiet"], "verbose", handler, "quiet", handler)
        self.assertEqual(verbosity.value, 0)
        getopt(["prog", "--verbose"], "verbose", handler, "quiet", handler)
        self.assertEqual(verbosity.value, 2)

    def test_canonical_name(self):
        seen = []
        args = parsed(["prog", "-v", "file"], "verbose|v", seen.append)
        self.assertEqual(seen, ["verbose"])
        self.assertEqual(args, ["prog", "file"])

    def test_option_and_value(self):
        seen = []

        def handler(option, value):
            seen.append((option, value))

        args = parsed(["prog", "--verbose", "2", "--verbose=3"], "verbose", handler)
        self.assertEqual(seen, [("verbose", "2"), ("verbose", "3")])
        self.assertEqual(args, ["prog"])

    def test_option_and_missing_value(self):
        with self.assertRaises(MissingValueError):
            getopt(["prog", "--verbose"], "verbose", lambda option, value: None)

    def test_no_arguments(self):
        calls = []
        args = parsed(
            ["prog", "--verbose", "--verbose=discarded", "file"],
            "verbose",
            lambda: calls.append(True),
        )
        self.assertEqual(len(calls), 2)
        self.assertEqual(args, ["prog", "file"])

    def test_explicit_arity(self):
        seen = []
        getopt(["prog", "--name", "x"], "name", callback(lambda *a: seen.append(a), 2))
        self.assertEqual(seen, [("name", "x")])

    def test_explicit_arity_out_of_range(self):
        args = ["prog", "--name", "x"]
        error = parse(args, "name", callback(print, 3)).get
        self.assertIsInstance(error, UnsupportedDestinationError)
        self.assertEqual(args, ["prog", "--name", "x"])

    def test_too_many_parameters(self):
        with self.assertRaises(UnsupportedDestinationError):
            getopt(["prog", "--x"], "x", lambda a, b, c: None)


class BundlingTest(unittest.TestCase):
    def test_unbundling_happens_first(self):
        verbose, filename = Var(False), Var("")
        self.assertEqual(
            parsed(["prog", "-fzv"], config.bundling, "f", filename, "v", verbose),
            ["prog"],
        )
        self.assertTrue(verbose.value)
        self.assertEqual(filename.value, "-z")

    def test_value_after_bundle(self):
        verbose, filename = Var(False), Var("")
        getopt(
            ["prog", "-vf", "filename"], config.bundling, "f", filename, "v", verbose
        )
        self.assertTrue(verbose.value)
        self.assertEqual(filename.value, "filename")

    def test_leftover_letter_is_unrecognized(self):
        verbose, filename = Var(False), Var("")
        with self.assertRaises(UnrecognizedOptionError) as cm:
            getopt(
                ["prog", "-fvz", "filename"],
                config.bundling,
                "f",
                filename,
                "v",
                verbose,
            )
        self.assertEqual(cm.exception.option, "-z")
        self.assertFalse(verbose.value)
        self.assertEqual(filename.value, "-v")

    def test_flags(self):
        linenum, filename = Var(False), Var(False)
        getopt(
            ["", "-nl"],
            config.bundling,
            "linenum|l",
            linenum,
            "filename|n",
            filename,
        )
        self.assertTrue(linenum.value)
        self.assertTrue(filename.value)

    def test_multi_letter_short_option(self):
        timeout = Var(0)
        with self.assertRaises(ConversionError):
            getopt(["prog", "-timeout"], config.bundling, "timeout|t", timeout)
        self.assertEqual(timeout.value, 0)

    def test_assigned_value(self):
        for opts in [(config.bundling,), ()]:
            addr = Var("")
            getopt(["prog", "-a=-0x12"], *opts, "a|addr", addr)
            self.assertEqual(addr.value, "-0x12")

        addr = Var("")
        with self.assertRaises(UnrecognizedOptionError):
            getopt(["prog", "--a=-0x12"], config.bundling, "a|addr", addr)
        self.assertEqual(addr.value, "")

    def test_no_bundling(self):
        a, b = Var(False), Var(False)
        with self.assertRaises(BooleanValueError):
            getopt(["prog", "-ab"], config.bundling, config.no_bundling, "a", a, "b", b)


class TerminatorTest(unittest.TestCase):
    def test_stops_processing(self):
        verbose = Var(False)
        args = parsed(["prog", "--", "-v"], "v", verbose)
        self.assertFalse(verbose.value)
        self.assertEqual(args, ["prog", "-v"])

    def test_options_before_terminator(self):
        foo, bar = Var(False), Var(False)
        args = parsed(["prog", "--foo", "--", "--bar"], "foo", foo, "bar", bar)
        self.assertTrue(foo.value)
        self.assertFalse(bar.value)
        self.assertEqual(args, ["prog", "--bar"])

    def test_removed_once(self):
        args = parsed(["prog", "--", "--"], "v", Var(False))
        self.assertEqual(args, ["prog", "--"])

    def test_disabled(self):
        verbose = Var(False)
        args = parsed(
            ["prog", "--", "-v"],
            config.pass_through,
            "v",
            verbose,
            syntax=Syntax(end_of_options=""),
        )
        self.assertTrue(verbose.value)
        self.assertEqual(args, ["prog", "--"])

    def test_process_wide_default(self):
        previous = syntax.END_OF_OPTIONS
        syntax.END_OF_OPTIONS = "---"
        try:
            verbose = Var(False)
            args = parsed(["prog", "---", "-v"], "v", verbose)
        finally:
            syntax.END_OF_OPTIONS = previous
        self.assertFalse(verbose.value)
        self.assertEqual(args, ["prog", "-v"])


class OptionCharTest(unittest.TestCase):
    def test_custom_syntax(self):
        verbose, length = Var(False), Var(0)
        args = parsed(
            ["prog", "++verbose", "+l:5", "-x"],
            "verbose",
            verbose,
            "length|l",
            length,
            syntax=Syntax(option_char="+", end_of_options="++", assign_char=":"),
        )
        self.assertTrue(verbose.value)
        self.assertEqual(length.value, 5)
        self.assertEqual(args, ["prog", "-x"])


class PassThroughTest(unittest.TestCase):
    def test_unrecognized_option(self):
        foo, bar = Var(False), Var(False)
        with self.assertRaises(UnrecognizedOptionError) as cm:
            getopt(["prog", "--foo", "--baz"], "foo", foo, "bar", bar)
        self.assertEqual(cm.exception.option, "--baz")

    def test_pass_through(self):
        foo, bar = Var(False), Var(False)
        args = parsed(
            ["prog", "--foo", "--baz", "file"],
            config.pass_through,
            "foo",
            foo,
            "bar",
            bar,
        )
        self.assertTrue(foo.value)
        self.assertEqual(args, ["prog", "--baz", "file"])

    def test_no_pass_through(self):
        with self.assertRaises(UnrecognizedOptionError):
            getopt(
                ["prog", "--baz"],
                config.pass_through,
                config.no_pass_through,
                "foo",
                Var(False),
            )

    def test_lone_dash_looks_like_an_option(self):
        with self.assertRaises(UnrecognizedOptionError):
            getopt(["prog", "-"], "foo", Var(False))


class CaseTest(unittest.TestCase):
    def test_case_sensitive(self):
        foo, bar = Var(False), Var(False)
        args = parsed(
            ["prog", "--foo", "--bAr"],
            config.case_sensitive,
            config.pass_through,
            "foo",
            foo,
            "bar",
            bar,
        )
        self.assertTrue(foo.value)
        self.assertFalse(bar.value)
        self.assertEqual(args, ["prog", "--bAr"])

    def test_directives_are_not_retroactive(self):
        foo, bar = Var(False), Var(False)
        args = parsed(
            ["prog", "--FOO", "--BAR"],
            config.pass_through,
            "foo",
            foo,
            config.case_sensitive,
            "bar",
            bar,
        )
        self.assertTrue(foo.value)
        self.assertFalse(bar.value)
        self.assertEqual(args, ["prog", "--BAR"])

    def test_case_insensitive_again(self):
        foo, bar = Var(False), Var(False)
        with self.assertRaises(UnrecognizedOptionError) as cm:
            getopt(
                ["prog", "--Foo", "--bAr"],
                config.case_sensitive,
                "foo",
                foo,
                config.case_insensitive,
                "bar",
                bar,
            )
        self.assertEqual(cm.exception.option, "--Foo")
        self.assertTrue(bar.value)


class StopOnFirstNonOptionTest(unittest.TestCase):
    def test_stops(self):
        foo, bar = Var(False), Var(False)
        args = parsed(
            ["prog", "--foo", "nonoption", "--bar"],
            config.stop_on_first_non_option,
            "foo",
            foo,
            "bar",
            bar,
        )
        self.assertTrue(foo.value)
        self.assertFalse(bar.value)
        self.assertEqual(args, ["prog", "nonoption", "--bar"])

    def test_unrecognized_after_non_option(self):
        foo, bar = Var(False), Var(False)
        args = parsed(
            ["prog", "--foo", "nonoption", "--zab"],
            config.stop_on_first_non_option,
            "foo",
            foo,
            "bar",
            bar,
        )
        self.assertTrue(foo.value)
        self.assertFalse(bar.value)
        self.assertEqual(args, ["prog", "nonoption", "--zab"])


class GetoptTest(unittest.TestCase):
    def test_synopsis(self):
        data, length, verbose, color = Var("file.dat"), Var(24), Var(False), Var(Timeout.no)
        args = parsed(
            ["prog", "--length=5", "--file", "dat.file", "--verbose", "--color", "yes"],
            "length",
            length,
            "file",
            data,
            "verbose",
            verbose,
            "color",
            color,
        )
        self.assertEqual(args, ["prog"])
        self.assertEqual(data.value, "dat.file")
        self.assertEqual(length.value, 5)
        self.assertTrue(verbose.value)
        self.assertEqual(color.value, Timeout.yes)

    def test_program_name_is_never_an_option(self):
        verbose = Var(False)
        args = parsed(["--verbose"], "verbose", verbose)
        self.assertFalse(verbose.value)
        self.assertEqual(args, ["--verbose"])

    def test_empty_arguments(self):
        with self.assertRaises(EmptyArgumentsError):
            getopt([], "verbose", Var(False))

    def test_bad_declarations(self):
        for opts in [("verbose",), (3, Var(False)), ("verbose", 3), ("v", Var(None))]:
            with self.assertRaises(UnsupportedDestinationError, msg=repr(opts)):
                getopt(["prog"], *opts)

    def test_idempotent(self):
        length, verbose = Var(24), Var(False)
        opts = (config.pass_through, "length", length, "verbose", verbose)
        args = parsed(["prog", "--length=5", "input", "--baz"], *opts)
        self.assertEqual(args, ["prog", "input", "--baz"])
        again = parsed(args, *opts)
        self.assertEqual(again, args)
        self.assertEqual(length.value, 5)
        self.assertFalse(verbose.value)

    def test_parse_returns_errors(self):
        error = parse(["prog", "--baz"], "foo", Var(False)).get
        self.assertIsInstance(error, UnrecognizedOptionError)
        self.assertIsInstance(error, ArgumentError)


class ParseArgsTest(unittest.TestCase):
    def setUp(self):
        self.testing, self.printing = parser.TESTING, parser.PRINTING
        parser.TESTING, parser.PRINTING = True, True

    def tearDown(self):
        parser.TESTING, parser.PRINTING = self.testing, self.printing

    def test_success(self):
        verbose = Var(False)
        args = ["prog", "--verbose", "file"]
        self.assertEqual(
            dollar_getopt.parse_args("verbose", verbose, args=args), ["prog", "file"]
        )
        self.assertEqual(args, ["prog", "--verbose", "file"])
        self.assertTrue(verbose.value)

    def test_error_is_printed(self):
        out = io.StringIO()
        with redirect_stdout(out):
            result = dollar_getopt.parse_args(
                "verbose",
                Var(False),
                args=["prog", "--baz"],
                usage="prog [--verbose]",
            )
        self.assertIsNone(result)
        self.assertEqual(
            out.getvalue(), "usage: prog [--verbose]\nUnrecognized option --baz\n"
        )


if __name__ == "__main__":
    unittest.main()
