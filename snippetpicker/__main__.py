"""Run the snippet picker with ``python -m snippetpicker``.

Accepts the same options as the ``snippet-picker`` script, e.g.
``python -m snippetpicker --file snippets.json --keys DOWN,ENTER``.
"""

from .cli import main


if __name__ == "__main__":
    main()
