"""Hypothesis strategies for gqlvalue property-based testing."""

from hypothesis import strategies as st

from gqlvalue import NULL, Boolean, Enum, List, Number, Object, String, Variable

name_strategy = st.from_regex(r"[_A-Za-z][_0-9A-Za-z]{0,15}", fullmatch=True)

number_strategy = st.one_of(
    st.integers().map(Number),
    st.floats(allow_nan=False, allow_infinity=False).map(Number),
)

# Scalars that survive a trip through JSON unchanged
json_scalar_strategy = st.one_of(
    st.just(NULL),
    st.booleans().map(Boolean),
    number_strategy,
    st.text().map(String),
)

# Values built only from variants that JSON can express
json_safe_value_strategy = st.recursive(
    json_scalar_strategy,
    lambda children: st.one_of(
        st.lists(children, max_size=5).map(List),
        st.dictionaries(st.text(max_size=20), children, max_size=5).map(Object),
    ),
    max_leaves=50,
)

# Any value without an upload
value_strategy = st.recursive(
    st.one_of(
        json_scalar_strategy,
        name_strategy.map(Enum),
        name_strategy.map(Variable),
    ),
    lambda children: st.one_of(
        st.lists(children, max_size=5).map(List),
        st.dictionaries(name_strategy, children, max_size=5).map(Object),
    ),
    max_leaves=50,
)

field_pairs_strategy = st.dictionaries(
    name_strategy, json_safe_value_strategy, max_size=8
).map(lambda fields: list(fields.items()))
