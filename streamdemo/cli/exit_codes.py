"""Reserved process exit codes for the CLI.

Demo runs exit with the code parsed from the first argument, or SUCCESS when
there is none; USER_ERROR is used only for failures before the demo starts.
"""

SUCCESS = 0
USER_ERROR = 2
