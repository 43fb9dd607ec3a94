from tarot_engine.config import configure_logging
from tarot_engine.logic import interpret_card_combination, perform_custom_reading, perform_reading

if __name__ == "__main__":
    configure_logging()

    # Example: three card spread, fixed seed so the output is repeatable
    print(perform_reading("three_card", "Should I change my career?", seed="demo-seed"))
    print("\n" + "=" * 72 + "\n")

    print(perform_custom_reading(
        "Crossroads",
        "Two paths and what lies between them",
        [
            {"name": "Path of the Heart", "meaning": "Where your feelings lead"},
            {"name": "Path of the Head", "meaning": "Where reason leads"},
            {"name": "The Bridge", "meaning": "What reconciles the two"},
        ],
        "Which way should I go?",
        seed="demo-seed",
    ))
    print("\n" + "=" * 72 + "\n")

    print(interpret_card_combination(
        [{"name": "The Fool"}, {"name": "The Magician"}, {"name": "Three of Cups", "orientation": "reversed"}],
        "Starting a new project with friends",
    ))
