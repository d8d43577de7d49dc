# simulations/__init__.py
"""
Monte Carlo dice-sum simulations.

Run a sampling pass via:
    python -m simulations.prob DiceCount DiceSideCount SamplePopCount Discard

Plot the resulting out.txt via:
    python -m simulations.plot [out.txt]
"""
