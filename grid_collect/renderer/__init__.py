"""Rendering subpackage.

Turns immutable ``State`` snapshots into visual representations:

* :mod:`grid_collect.renderer.image` draws an RGBA Pillow image with simple
    shapes (player disc, item star, obstacle cross), suitable for the
    Streamlit app and the Gymnasium observation.
* :mod:`grid_collect.renderer.text` produces a plain ASCII board for logs,
    terminals and tests.

Both read state only; neither feeds anything back into the engine.
"""
