"""Quarrywatch monitor — read-only views over the latest job-state snapshot.

The monitor never writes job state.  Every render re-reads the store.

Modules
-------
stats
    Pure aggregation of a ``JobStateSnapshot`` into ``QuarryStats``:
    progress, smoothed average duration, elapsed and remaining estimates.
text_renderer
    ``TextRenderer`` writes the statistics readout to a text surface on
    its own cadence; ``build_stats_panel`` renders a one-shot Rich panel.
map_renderer
    ``MapRenderer`` plots the hole lattice on every display surface.
"""
