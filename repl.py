import logging

from numbux import config
from numbux.keypad import Keypad, KeypadError
from numbux.runtime import evaluate

KEY_PRESS_PREFIX = ":"


if __name__ == "__main__":
    logging.basicConfig(level=config.LOG_LEVEL, format="%(levelname)s %(name)s: %(message)s")

    keypad = Keypad()

    while True:
        try:
            code = input("> ")
        except (EOFError, KeyboardInterrupt):
            print()
            break

        if not code.startswith(KEY_PRESS_PREFIX):
            print(evaluate(code))
            continue

        # ":7 × 3 =" presses the keys one by one on the session keypad
        try:
            for label in code[len(KEY_PRESS_PREFIX) :].split():
                keypad.press(label)
        except KeypadError as e:
            print(e)
            continue

        print(keypad.text)
