import os
import time

from huffcodec.codecs import build
from huffcodec.code_display import CodeDisplay
from huffcodec.logger import Logger
from huffcodec.statistics import CodeStatistics

lorem_ipsum_1par = "Lorem ipsum dolor sit amet, consectetur adipiscing elit. Donec a consectetur ligula. Nunc erat dolor, tristique sed sagittis quis, dignissim eget erat. Vivamus enim lorem, finibus sit amet maximus eget, condimentum sit amet massa. Fusce aliquet velit sit amet ex pretium, ut tincidunt dolor semper. Nulla pellentesque eget massa quis rhoncus. Curabitur maximus quis mauris vel sollicitudin. Integer tristique ut nisl sed consequat. Donec a ipsum ut sem cursus ullamcorper. Sed finibus, sapien id volutpat tempus, turpis odio placerat purus, sit amet scelerisque nibh sem a magna. Sed justo sem, facilisis at imperdiet eu, tincidunt vel quam. Ut id sollicitudin eros, sit amet bibendum tortor. Lorem ipsum dolor sit amet, consectetur adipiscing elit."

output_folder = "experiments_output"

def main():
    os.makedirs(output_folder, exist_ok=True)

    logger = Logger()
    logger.display_info = False

    start_time = time.time()
    code = build(lorem_ipsum_1par, logger=logger)
    build_time = time.time() - start_time

    start_time = time.time()
    decoded = code.decode(code.get_encoded_message())
    decode_time = time.time() - start_time

    packed, bit_length = code.get_packed_message()
    print(f"Size of original data: {len(lorem_ipsum_1par.encode())} bytes")
    print(f"Size of packed data: {len(packed)} bytes ({bit_length} bits)")
    print(f"Build time: {build_time:.4f}s, Decode time: {decode_time:.4f}s")
    print(CodeStatistics.from_code(code))

    if decoded == lorem_ipsum_1par:
        print("Data integrity preserved.")
    else:
        print("Data integrity compromised.")

    display = CodeDisplay(code, logger.logs)
    display.generate_code_length_plot(save_path=os.path.join(output_folder, "code_lengths.png"))
    display.generate_coding_log_plot(save_path=os.path.join(output_folder, "coding_log.png"))
    logger.save(os.path.join(output_folder, "log.txt"))

if __name__ == "__main__":
    main()
