"""
User interface layers for the casino betting simulator.
"""
