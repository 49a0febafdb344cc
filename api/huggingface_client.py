from .base_client import TopicTemplateSimulator


class HuggingFaceSimulator(TopicTemplateSimulator):
    """Simulated HuggingFace Inference provider (Mistral-7B Instruct)."""

    provider_name = "huggingface"
    source = "HuggingFace Mistral-7B"
    title_prefix = "HuggingFace Analysis"
    default_model = "mistralai/Mistral-7B-Instruct-v0.2-simulated"

    topics = {
        "technology": (
            "Technological advancements continue to reshape our world at an unprecedented pace. "
            "Recent developments in neural networks have enabled more efficient processing with "
            "lower computational requirements, making AI more accessible to smaller organizations."
        ),
        "science": (
            "Scientific research has made remarkable strides in understanding cellular mechanisms. "
            "New findings suggest potential applications in regenerative medicine that could "
            "revolutionize treatment approaches for previously incurable conditions."
        ),
        "business": (
            "Business trends indicate a growing emphasis on sustainable practices and ethical "
            "considerations. Companies implementing environmentally conscious policies are "
            "experiencing improved customer loyalty and stronger market positioning."
        ),
        "health": (
            "Health research emphasizes the critical role of preventative care and lifestyle "
            "factors. Studies show that regular physical activity combined with a balanced diet "
            "can significantly reduce the risk of chronic diseases."
        ),
        "politics": (
            "Political landscapes are experiencing increased fragmentation across democratic "
            "systems. Building consensus requires focusing on shared values and establishing "
            "common ground despite ideological differences."
        ),
        "education": (
            "Educational methodologies are evolving to incorporate more personalized approaches. "
            "Adaptive learning systems that respond to individual student needs show promising "
            "results in improving learning outcomes across diverse student populations."
        ),
    }

    generic_content = (
        "The query requires consideration of multiple factors and perspectives. A more specific "
        "question would help provide more targeted information on this topic."
    )

    closing_template = (
        'This response was generated based on your query: "{query}". For more detailed '
        "information, consider specifying particular aspects of interest."
    )
