from unittest.mock import patch

import pytest
from graphql import DocumentNode, parse

from contentful_graphql_validator.errors import FragmentCycleError
from contentful_graphql_validator.fragment_usages import (
    FragmentUsageIndex,
    RootReachabilityResolver,
)

from .utils import get_fragment, get_fragments


def describe_fragment_usage_index():
    document = parse(
        """
        query {
          ...MyFragment
          field {
            ...MyFragment
          }
        }

        fragment MyFragment on Type {
          field
        }

        fragment OtherFragment on Type {
          ...MyFragment
        }
        """
    )

    def caches_and_returns_the_usages():
        sut = FragmentUsageIndex(document)
        fragment = get_fragment(document, 'MyFragment')

        actual = sut.usages_of(fragment)

        assert len(actual) == 3
        assert sut.usages_of(fragment) is actual

    def caches_fragments_independently():
        sut = FragmentUsageIndex(document)
        my_fragment = get_fragment(document, 'MyFragment')
        other_fragment = get_fragment(document, 'OtherFragment')

        other_usages = sut.usages_of(other_fragment)

        assert other_usages == []
        assert sut.usages_of(my_fragment) is not other_usages
        assert sut.usages_of(other_fragment) is other_usages

    def keeps_a_copy_of_the_ancestors():
        sut = FragmentUsageIndex(document)

        usages = sut.usages_of(get_fragment(document, 'MyFragment'))

        assert all(isinstance(usage.ancestors, tuple) for usage in usages)
        assert all(isinstance(usage.ancestors[0], DocumentNode) for usage in usages)
        # the nested spread has the `field` node and its selection set on top
        assert len(usages[1].ancestors) > len(usages[0].ancestors)


def describe_root_reachability_resolver():
    document = parse(
        """
        query {
          ...Fragment1
          field1 {
            ...Fragment3
          }
        }

        fragment Fragment1 on Type {
          field2
          ...Fragment2
          field3 {
            ...Fragment4
          }
        }

        fragment Fragment2 on Type {
          field4
        }

        fragment Fragment3 on Type {
          field5
        }

        fragment Fragment4 on Type {
          field6
        }

        fragment Fragment5 on Type {
          field7
        }
        """
    )

    expected = {
        'Fragment1': True,
        'Fragment2': True,
        'Fragment3': False,
        'Fragment4': False,
        'Fragment5': False,
    }

    def caches_and_returns_the_value():
        sut = RootReachabilityResolver(document)

        fragments = get_fragments(document)
        assert len(fragments) == len(expected)
        for fragment in fragments:
            name = fragment.name.value
            actual = sut.is_used_in_root(fragment)

            assert actual is expected[name], name
            assert sut.is_used_in_root(fragment) is actual, name

    def does_not_look_up_usages_again_once_resolved():
        usages = FragmentUsageIndex(document)
        sut = RootReachabilityResolver(document, usages)
        fragment = get_fragment(document, 'Fragment2')

        with patch.object(usages, 'usages_of', wraps=usages.usages_of) as usages_of:
            assert sut.is_used_in_root(fragment) is True
            call_count = usages_of.call_count
            assert call_count > 0

            assert sut.is_used_in_root(fragment) is True
            assert sut.is_used_in_root(get_fragment(document, 'Fragment1')) is True
            assert usages_of.call_count == call_count

    def shares_the_usage_index():
        usages = FragmentUsageIndex(document)
        sut = RootReachabilityResolver(document, usages)

        assert sut.fragment_usages is usages

    def fragments_reused_along_several_paths_are_not_a_cycle():
        diamond = parse(
            """
            query {
              field {
                ...Top
              }
            }

            fragment Shared on Type {
              field
            }

            fragment Left on Type {
              ...Shared
            }

            fragment Right on Type {
              ...Shared
            }

            fragment Top on Type {
              ...Left
              ...Right
            }
            """
        )
        sut = RootReachabilityResolver(diamond)

        assert sut.is_used_in_root(get_fragment(diamond, 'Shared')) is False
        assert sut.is_used_in_root(get_fragment(diamond, 'Top')) is False

    def describe_fragment_usage_cycle():
        def raises_error():
            cyclic = parse(
                """
                fragment Fragment1 on Type {
                  ...Fragment2
                }

                fragment Fragment2 on Type {
                  ...Fragment3
                }

                fragment Fragment3 on Type {
                  ...Fragment1
                }
                """
            )
            sut = RootReachabilityResolver(cyclic)

            fragments = get_fragments(cyclic)
            assert len(fragments) == 3
            for fragment in fragments:
                with pytest.raises(FragmentCycleError, match='cycle'):
                    sut.is_used_in_root(fragment)

        def lists_the_fragments_in_visiting_order():
            cyclic = parse(
                """
                fragment A on Type {
                  ...B
                }

                fragment B on Type {
                  ...A
                }
                """
            )
            sut = RootReachabilityResolver(cyclic)

            with pytest.raises(FragmentCycleError) as exc_info:
                sut.is_used_in_root(get_fragment(cyclic, 'A'))

            assert exc_info.value.message == 'A fragment cycle has been detected: A->B->A'
            assert exc_info.value.fragment_names == ['A', 'B', 'A']

        def ignores_cycles_through_nested_spreads():
            nested = parse(
                """
                fragment A on Type {
                  field {
                    ...B
                  }
                }

                fragment B on Type {
                  ...A
                }
                """
            )
            sut = RootReachabilityResolver(nested)

            assert sut.is_used_in_root(get_fragment(nested, 'A')) is False
