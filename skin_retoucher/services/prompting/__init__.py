# skin_retoucher/services/prompting/__init__.py

"""
Prompt composition for the retouching model: the base protocol, guardrail and
style templates, the merge engine that layers them, the schema validator and
the serializers that turn the result into request text.
"""
