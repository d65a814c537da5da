"""Hello World -- the simplest jinx example.

Build a small node tree with a component and render it to HTML.

Run:
    python app.py
"""

from jinx import jsx


def Greeting(name, children=None):
    return jsx("p", {"class": "greeting"}, "Hello, ", name, "!")


page = jsx("main", None, jsx(Greeting, {"name": "World"}))

# Render synchronously: nothing in the tree is awaitable
output = page.render()


def main() -> None:
    print(output)
    print()

    # Same component, different props
    for name in ["jinx", "<Python>"]:
        print(jsx(Greeting, {"name": name}).render())


if __name__ == "__main__":
    main()
