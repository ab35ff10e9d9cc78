import sys

from huffcodec.codecs import build
from huffcodec.errors import HuffmanError


def main():
    to_encode = input("Please enter a string you would like to encode: ")

    try:
        code = build(to_encode)
        print()
        print(code.format_code_table())
        print()
        print(f"The encoded message is: {code.get_encoded_message()}")
        print(f"The decoded message is: {code.decode(code.get_encoded_message())}")
    except HuffmanError as error:
        print(f"Could not encode the string: {error}")
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())
