"""
panelkit core: schema IR, errors, configuration and logging setup.
"""
