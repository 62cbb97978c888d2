"""ColorFlow level-designer core over HTTP (Flask).

Exposes the color-blending puzzle logic as a small JSON API so the level
editor can ask what two colors blend to and whether a level is solvable.

Endpoints
---------
/blend       – blend two colors at a ratio ("symbolic" or "interpolate").
/path        – breadth-first search for a blend sequence start → target.
/min-steps   – fewest blends needed, or -1 when unreachable.
/chart       – the symbolic mixing chart (36 pairs).
/level/check – POST a level record, get solvability and min steps back.

Usage
-----
$ pip install -e .
$ python main.py                # starts on http://127.0.0.1:5000
"""

from colorflow.app import create_app

if __name__ == "__main__":
    # Production: debug=False; threaded=True is fine, every request is CPU-only.
    create_app().run(debug=False, threaded=True)
