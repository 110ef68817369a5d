"""contrast-tool: sRGB relative luminance and WCAG 2.1 contrast ratios."""
