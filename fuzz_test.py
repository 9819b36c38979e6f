import string
import unittest
from typing import List

from hypothesis import given, settings
from hypothesis import strategies as st

from dollar_getopt import Configuration, Syntax, Var, config, getopt
from dollar_getopt.bundling import is_bundle, unbundle
from dollar_getopt.classify import classify

st_name = st.text(alphabet=string.ascii_lowercase, min_size=2, max_size=10)
st_piece = st.text(
    alphabet=st.characters(exclude_characters=",", exclude_categories=["Cs"]),
    max_size=10,
)
st_positional = st.text(
    alphabet=st.characters(exclude_categories=["Cs"]), min_size=1, max_size=10
).filter(lambda s: not s.startswith("-"))
st_configuration = st.builds(
    Configuration,
    case_sensitive=st.booleans(),
    bundling=st.booleans(),
    no_space_only_for_short_numeric_options=st.booleans(),
    pass_through=st.booleans(),
    stop_on_first_non_option=st.booleans(),
)


def scalar_forms(name: str, short: str, text: str) -> List[List[str]]:
    return [
        [f"--{name}={text}"],
        [f"--{name}", text],
        [f"-{short}{text}"],
        [f"-{short}={text}"],
        [f"-{short}", text],
    ]


class FuzzTest(unittest.TestCase):
    @settings(deadline=2000)
    @given(st_name, st.integers())
    def test_scalar_forms(self, name, n):
        for form in scalar_forms(name, name[0], str(n)):
            value = Var(0)
            args = ["prog", *form]
            getopt(args, f"{name}|{name[0]}", value)
            self.assertEqual(value.value, n, form)
            self.assertEqual(args, ["prog"])

    @given(st_name, st.integers(), st.integers(min_value=0, max_value=10))
    def test_incremental(self, name, initial, n):
        value = Var(initial)
        args = ["prog"] + [f"--{name}"] * n
        getopt(args, f"{name}+", value)
        self.assertEqual(value.value, initial + n)
        self.assertEqual(args, ["prog"])

    @given(
        st_name,
        st.lists(st_piece, min_size=1, max_size=5).filter(lambda ps: ",".join(ps)),
    )
    def test_sequence(self, name, pieces):
        inline, spaced = [], []
        getopt(["prog", f"--{name}={','.join(pieces)}"], name, inline)
        getopt(["prog", f"--{name}", ",".join(pieces)], name, spaced)
        self.assertEqual(inline, pieces)
        self.assertEqual(spaced, pieces)

    @given(st_name, st.lists(st_positional, max_size=5))
    def test_positionals_are_left_alone(self, name, positionals):
        args = ["prog", *positionals]
        getopt(args, name, Var(False))
        self.assertEqual(args, ["prog", *positionals])

    @given(st.lists(st.sampled_from(string.ascii_lowercase), min_size=2, unique=True))
    def test_bundled_flags(self, letters):
        flags = {c: Var(False) for c in letters}
        opts = [config.bundling]
        for c, v in flags.items():
            opts += [c, v]
        args = ["prog", "-" + "".join(letters)]
        getopt(args, *opts)
        self.assertEqual(args, ["prog"])
        self.assertTrue(all(v.value for v in flags.values()))

    @given(st.text(), st_name, st_configuration, st.booleans())
    def test_classify_is_total(self, token, pattern, cfg, numeric):
        match = classify(token, pattern, cfg, numeric, Syntax())
        if match:
            self.assertTrue(token.startswith("-"))
        else:
            self.assertIsNone(match.value)

    @given(st.text(min_size=1))
    def test_unbundle_preserves_characters(self, body):
        token = "-" + body
        tokens = unbundle(token, Syntax())
        self.assertEqual("".join(t[1:] for t in tokens), body)
        self.assertFalse(any(is_bundle(t, Syntax()) for t in tokens))


if __name__ == "__main__":
    unittest.main()
