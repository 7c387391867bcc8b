"""
Session control commands (lock, log out, suspend, hibernate, reboot, power
off) resolved for the running desktop environment.
"""
