class InputHandler:
    """Class that supplies the user's action"""

    def get_input(self) -> str:
        """Return the action to perform (fixed for this demo)"""
        return "Start Car"


class OutputHandler:
    """Class that prints results for the user"""

    def display_output(self, output: str) -> None:
        print(f"Output: {output}")
