"""Shared hypothesis strategies for jinx property-based testing.

- **Text**: untrusted strings, including every character HTML treats specially
- **Trees**: nested element/fragment trees with text, numbers and sequences
"""

from __future__ import annotations

from hypothesis import strategies as st

from jinx import jsx

# Text biased towards the characters escaping must handle
untrusted_text = st.text(
    alphabet=st.one_of(
        st.sampled_from("<>&\"'"),
        st.characters(blacklist_categories=("Cs",)),
    ),
    min_size=0,
    max_size=80,
)

tag_names = st.sampled_from(["div", "span", "p", "li", "ul", "section", "br", "img"])

attribute_values = st.one_of(
    untrusted_text,
    st.integers(min_value=-1000, max_value=1000),
    st.booleans(),
    st.none(),
)

attributes = st.dictionaries(
    st.sampled_from(["class", "title", "id", "hidden", "disabled", "data-x"]),
    attribute_values,
    max_size=4,
)

leaf_children = st.one_of(
    untrusted_text,
    st.integers(min_value=-1000, max_value=1000),
    st.none(),
    st.booleans(),
)


def _node(children: st.SearchStrategy) -> st.SearchStrategy:
    return st.builds(
        lambda tag, props, kids: jsx(tag, props, *kids),
        st.one_of(tag_names, st.just("")),
        attributes,
        st.lists(children, max_size=4),
    )


# Children: leaves, nodes, and nested lists of either
child_trees = st.recursive(
    leaf_children,
    lambda inner: st.one_of(_node(inner), st.lists(inner, max_size=3)),
    max_leaves=25,
)

node_trees = _node(child_trees)

# (text, number of event-loop yields before it resolves)
delayed_texts = st.lists(
    st.tuples(untrusted_text, st.integers(min_value=0, max_value=5)),
    min_size=1,
    max_size=8,
)
