import matplotlib.pyplot as plt
import numpy as np

from .codecs import HuffmanCode
from .logger import CodingLog
from .statistics import CodeStatistics

class CodeDisplay:
    def __init__(self, huffman_code, logs=None,
                 fig_size=(10, 6), dpi=100, font_size=12,
                 dot_size=5, dot_alpha=0.3,
                 dot_color='blue', bar_color='steelblue',
                 trend_line_color='red', trend_line_linewidth=2,
                 moving_avg_window=10):
        if not isinstance(huffman_code, HuffmanCode):
            raise ValueError("huffman_code must be of type HuffmanCode")
        self.huffman_code = huffman_code
        self.logs = logs if logs is not None else []
        self.fig_size = fig_size
        self.dpi = dpi
        self.font_size = font_size
        self.dot_size = dot_size
        self.dot_alpha = dot_alpha
        self.dot_color = dot_color
        self.bar_color = bar_color
        self.trend_line_color = trend_line_color
        self.trend_line_linewidth = trend_line_linewidth
        self.moving_avg_window = moving_avg_window

    def _moving_average(self, data):
        window = self.moving_avg_window
        if window < 1:
            raise ValueError("moving_avg_window must be at least 1")
        # mode='same' returns max(len(data), window) points
        window = min(window, len(data))
        return np.convolve(data, np.ones(window) / window, mode='same')

    def _finish(self, title, xlabel, ylabel, show_graph, save_path):
        plt.title(title, fontsize=self.font_size + 2)
        plt.xlabel(xlabel, fontsize=self.font_size)
        plt.ylabel(ylabel, fontsize=self.font_size)
        plt.grid(True)
        plt.legend(fontsize=self.font_size)
        plt.tight_layout()

        if save_path:
            plt.savefig(save_path)
        if show_graph:
            plt.show()
        plt.close()

    def generate_code_length_plot(self, show_graph=False, save_path=None):
        stats = CodeStatistics.from_code(self.huffman_code)
        # most frequent symbols first
        order = np.argsort(-stats.frequencies, kind='stable')
        labels = [repr(stats.symbols[i]) for i in order]
        x = np.arange(len(order))

        plt.figure(figsize=self.fig_size, dpi=self.dpi)
        plt.bar(x, stats.code_lengths[order], color=self.bar_color, label="Code length (bits)")
        plt.plot(x, stats.frequencies[order] / stats.frequencies.max() * stats.code_lengths.max(),
                 color=self.trend_line_color, linewidth=self.trend_line_linewidth, label="Relative frequency")
        plt.xticks(x, labels, fontsize=self.font_size - 2)
        self._finish("Code Length per Symbol", "Symbol", "Bits", show_graph, save_path)

    def generate_coding_log_plot(self, show_graph=False, save_path=None):
        values = [log.encoded_size for log in self.logs if isinstance(log, CodingLog)]
        if not values:
            print("No data available for Encoded Symbol Size.")
            return

        x = np.arange(1, len(values) + 1)
        y = np.array(values)
        trend = self._moving_average(y)

        plt.figure(figsize=self.fig_size, dpi=self.dpi)
        plt.scatter(x, y, s=self.dot_size, alpha=self.dot_alpha, color=self.dot_color, label="Data points")
        plt.plot(x, trend, color=self.trend_line_color, linewidth=self.trend_line_linewidth, label="Moving Average Trend")
        self._finish("Encoded Symbol Size", "Symbol Order", "Bits", show_graph, save_path)
