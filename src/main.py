from business_logic import BusinessLogic
from calculator import Calculator
from engine import ElectricEngine, PetrolEngine
from handlers import InputHandler, OutputHandler
from vehicle import Bike, Car, Truck


def main():
    """Main application entry point"""
    # Single responsibility: input, logic and output live in separate classes
    input_handler = InputHandler()
    business_logic = BusinessLogic()
    output_handler = OutputHandler()

    user_action = input_handler.get_input()
    business_logic.process_action(user_action)
    output_handler.display_output("Car started successfully!")

    # Dependency inversion: the vehicle only knows the Engine capability
    my_car = Car(PetrolEngine())
    my_car.start_engine()
    my_car.refuel()

    # Bike has no refuel, so it is only started
    my_bike = Bike(ElectricEngine())
    my_bike.start_engine()

    my_truck = Truck(PetrolEngine())
    my_truck.start_engine()
    my_truck.refuel()

    calc = Calculator()
    print(f"Addition of ints: {calc.add_int(2, 3)}")
    print(f"Addition of doubles: {calc.add_float(2.5, 3.5)}")
    print(f"Addition of strings: {calc.add_str('Hello', ' World')}")


# Ensure main() only runs if this script is executed directly
if __name__ == "__main__":
    main()
