class BusinessLogic:
    """Decides what to do with an action coming from the input side"""

    START_CAR = "Start Car"

    def process_action(self, action: str) -> None:
        """Print what the action triggers; matching ignores case only"""
        if action.casefold() == self.START_CAR.casefold():
            print("Processing car startup.")
        else:
            print("Unknown action.")  # Anything else, including padded input
