"""
Feature modules.

Each feature is self-contained:
- pacing/: route model, pace/schedule/fatigue calculators, trip session
"""
