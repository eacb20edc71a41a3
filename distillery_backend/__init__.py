"""
Distillery recommendation service.

Loads the Louisville bourbon dataset once at startup and recommends
distilleries whose bourbons resemble the ones a user has picked.
"""
