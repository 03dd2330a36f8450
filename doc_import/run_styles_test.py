# Copyright 2025 Google LLC
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
# ==============================================================================


import unittest

from doc_import import run_styles
from shared.blog_doc import Run, RunStyle


class RenderRunTest(unittest.TestCase):

    def test_whitespace_run_renders_nothing(self):
        self.assertEqual(run_styles.render(Run(" \t ")), "")
        self.assertEqual(run_styles.render(Run("", RunStyle(bold=True))), "")

    def test_plain_text(self):
        self.assertEqual(run_styles.render(Run("Hello world")), "Hello world")

    def test_bold_italic_with_font_size(self):
        run = Run("TEXT", RunStyle(bold=True, italic=True, font_size_pt=12))
        self.assertEqual(
            run_styles.render(run),
            '<span style="font-size:12px"><em><strong>TEXT</strong></em></span>',
        )

    def test_underline_is_outermost_emphasis(self):
        run = Run("x", RunStyle(bold=True, italic=True, underline=True))
        self.assertEqual(run_styles.render(run), "<u><em><strong>x</strong></em></u>")

    def test_underline_only(self):
        self.assertEqual(run_styles.render(Run("x", RunStyle(underline=True))), "<u>x</u>")

    def test_declaration_order(self):
        run = Run(
            "hi",
            RunStyle(font_size_pt=11, color_rgb=(0.0, 0.0, 0.0), font_family="Arial"),
        )
        self.assertEqual(
            run_styles.render(run),
            '<span style="font-size:11px; color:rgb(0,0,0); font-family:Arial">hi</span>',
        )

    def test_color_channels_are_scaled_and_rounded(self):
        run = Run("red", RunStyle(color_rgb=(1.0, 0.0, 0.2)))
        self.assertEqual(
            run_styles.render(run), '<span style="color:rgb(255,0,51)">red</span>'
        )

    def test_text_is_escaped(self):
        self.assertEqual(
            run_styles.render(Run("a < b & <script>")),
            "a &lt; b &amp; &lt;script&gt;",
        )

    def test_font_family_is_escaped_in_attribute(self):
        run = Run("x", RunStyle(font_family='Evil" onload="x'))
        self.assertEqual(
            run_styles.render(run),
            '<span style="font-family:Evil&quot; onload=&quot;x">x</span>',
        )


class CssHelpersTest(unittest.TestCase):

    def test_css_number(self):
        self.assertEqual(run_styles.css_number(12.0), "12")
        self.assertEqual(run_styles.css_number(10.5), "10.5")
        self.assertEqual(run_styles.css_number(0), "0")

    def test_color_channel_rounds_half_up(self):
        self.assertEqual(run_styles.color_channel(0.5), 128)
        self.assertEqual(run_styles.color_channel(0.2), 51)
        self.assertEqual(run_styles.color_channel(None), 0)

    def test_color_channel_is_clamped(self):
        self.assertEqual(run_styles.color_channel(1.2), 255)
        self.assertEqual(run_styles.color_channel(-0.1), 0)
        self.assertEqual(
            run_styles.css_color((1.5, -1.0, 0.0)), "rgb(255,0,0)"
        )

    def test_css_length(self):
        self.assertEqual(run_styles.css_length(None), "0px")
        self.assertEqual(run_styles.css_length(36), "36px")
        self.assertEqual(run_styles.css_length(18.5), "18.5px")


if __name__ == "__main__":
    unittest.main()
