import factory

from resources.dataclasses import Resource


class ResourceFactory(factory.Factory):
    class Meta:
        model = Resource

    url = factory.Sequence(lambda n: "https://example.com/%d/resource" % n)
    description = factory.Sequence(lambda n: "Resource %d" % n)
