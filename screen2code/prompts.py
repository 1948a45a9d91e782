"""Framework enum and the fixed instruction prompt for each one."""
from enum import Enum
from types import MappingProxyType


class Framework(str, Enum):
    REACT = "react"
    VUE = "vue"
    HTML = "html"


REACT_PROMPT = """You are an expert React developer. Analyze this UI screenshot and generate a production-ready React component.

REQUIREMENTS:
- Use functional components with hooks
- Include proper TypeScript types
- Use Tailwind CSS for styling (utility classes only)
- Make it responsive (mobile-first approach)
- Use semantic HTML elements
- Include proper accessibility attributes
- Add helpful comments for complex logic
- Follow React best practices

OUTPUT FORMAT:
- Return ONLY the component code, no explanations
- Do NOT wrap the code in markdown code fences
- Start with imports
- Export as default
- Use descriptive variable/component names
- Keep it clean and maintainable

Generate the React component now:"""

VUE_PROMPT = """You are an expert Vue developer. Analyze this UI screenshot and generate a production-ready Vue 3 component.

REQUIREMENTS:
- Use Vue 3 Composition API with <script setup>
- Include proper TypeScript types
- Use Tailwind CSS for styling (utility classes only)
- Make it responsive (mobile-first approach)
- Use semantic HTML elements
- Include proper accessibility attributes
- Follow Vue 3 best practices

OUTPUT FORMAT:
- Return ONLY the component code, no explanations
- Do NOT wrap the code in markdown code fences
- Use proper SFC structure (template, script, style)
- Use descriptive variable/component names
- Keep it clean and maintainable

Generate the Vue component now:"""

HTML_PROMPT = """You are an expert frontend developer. Analyze this UI screenshot and generate production-ready HTML with Tailwind CSS.

REQUIREMENTS:
- Use semantic HTML5 elements
- Use Tailwind CSS for styling (utility classes only)
- Make it responsive (mobile-first approach)
- Include proper accessibility attributes
- Add meta viewport for mobile
- Keep markup clean and organized
- Include helpful comments

OUTPUT FORMAT:
- Return ONLY the HTML code, no explanations
- Do NOT wrap the code in markdown code fences
- Include necessary Tailwind CDN link in head
- Use proper document structure
- Keep it clean and maintainable

Generate the HTML now:"""


PROMPTS = MappingProxyType({
    Framework.REACT: REACT_PROMPT,
    Framework.VUE: VUE_PROMPT,
    Framework.HTML: HTML_PROMPT,
})


def select_prompt(framework: Framework) -> str:
    return PROMPTS[framework]
