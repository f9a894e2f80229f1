# mrgcar/seeds/__init__.py
# One-off data loaders. Each module is its own entry point:
#   python -m mrgcar.seeds.cars | cars_turkish | admin | forum | news | forum_counts
