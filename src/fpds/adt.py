"""Algebraic data types."""
from functools import partial
from types import (
    DynamicClassAttribute,
    GenericAlias,
    MappingProxyType,
    new_class,
)
from typing import Any


ADT = None


def _is_descriptor(obj: Any) -> bool:
    return (
        hasattr(obj, "__get__") or hasattr(obj, "__set__") or hasattr(obj, "__delete__")
    )


def _is_member(name: str, value: Any) -> bool:
    if name.startswith("_"):
        return False
    return isinstance(value, type) or not _is_descriptor(value)


class ADTMeta(type):
    """
    Metaclass for ADT
    """

    def __instancecheck__(cls, instance: Any) -> bool:
        return type(instance) in cls._cls_set_ or type.__instancecheck__(cls, instance)

    @classmethod
    def __prepare__(metacls, cls, bases, **kwds):
        # check that previous variants do not exist
        metacls._check_for_existing_members(cls, bases)
        if len(bases) > 1:
            raise TypeError("ADTs do not support mixins")
        return {}

    def __new__(metacls, cls, bases, classdict, **kwds):
        # an ADT class is final once its variants have been defined.
        #
        # save variants into a separate mapping so they don't get baked into
        # the new class
        members = {k: v for k, v in classdict.items() if bases and _is_member(k, v)}
        for name in members:
            del classdict[name]

        # check for illegal variant names (any others?)
        invalid_names = set(members) & {"mro"}
        if invalid_names:
            raise ValueError(
                "Invalid ADT member name: {0}".format(",".join(invalid_names))
            )

        custom_methods = metacls._gather_user_methods(classdict) if bases else {}

        # create a default docstring if one has not been provided
        if "__doc__" not in classdict:
            classdict["__doc__"] = "An ADT."

        adt_class = super().__new__(metacls, cls, bases, classdict, **kwds)
        adt_class._member_names_ = []  # names in definition order
        adt_class._member_map_ = {}  # name->variant map
        adt_class._values_map_ = {}  # only for values, not classes
        adt_class._cls_set_ = set()

        # Reverse value->member map for hashable values.
        adt_class._value2member_map_ = {}

        def customize_subclass_ns(ns: dict[str, Any], variant: type):
            ns["__module__"] = variant.__module__
            ns["__qualname__"] = variant.__qualname__
            for k, v in custom_methods.items():
                ns[k] = v

        for member_name, value in members.items():
            is_alias = False
            if isinstance(value, type):
                # We subclass the variant so it picks up the methods declared
                # on the ADT body
                member = new_class(
                    value.__name__,
                    (value,),
                    exec_body=partial(customize_subclass_ns, variant=value),
                )
                adt_class._cls_set_.add(member)
            else:
                member = object.__new__(adt_class)
                member._value_ = value
                member._name_ = member_name
                member.__objclass__ = adt_class
                # If another constant with the same value was already defined,
                # the new one becomes an alias to the existing one.
                for canonical in adt_class._values_map_.values():
                    if canonical._value_ == value:
                        member = canonical
                        is_alias = True
                        break
            # Aliases don't appear in member names (only in __members__).
            if not is_alias:
                adt_class._member_names_.append(member_name)
            setattr(adt_class, member_name, member)
            adt_class._member_map_[member_name] = member
            if not isinstance(value, type):
                adt_class._values_map_[member_name] = member
                try:
                    # This may fail if value is not hashable. Lookups for this
                    # value will be linear.
                    adt_class._value2member_map_[value] = member
                except TypeError:
                    pass

        return adt_class

    def __bool__(cls):
        """
        classes/types should always be True.
        """
        return True

    def __call__(cls, value):
        """
        Return the variant matching `value`.

        Variant instances are returned unchanged, anything else is looked up
        among the constant variants by value (i.e. Color(3)).
        """
        if cls is ADT:
            raise TypeError("ADT cannot be instantiated directly")
        if type(value) is cls or type(value) in cls._cls_set_:
            return value
        try:
            return cls._value2member_map_[value]
        except KeyError:
            pass
        except TypeError:
            # not hashable, do the long search -- O(n) behavior
            for member in cls._values_map_.values():
                if member._value_ == value:
                    return member
        raise ValueError("%r is not a valid %s" % (value, cls.__qualname__))

    def __contains__(cls, obj):
        return isinstance(obj, cls)

    def __delattr__(cls, attr):
        # nicer error message when someone tries to delete a variant
        if attr in cls._member_map_:
            raise AttributeError("%s: cannot delete ADT member." % cls.__name__)
        super().__delattr__(attr)

    def __dir__(cls):
        return [
            "__class__",
            "__doc__",
            "__members__",
            "__module__",
        ] + cls._member_names_

    def __iter__(cls):
        """
        Returns variants in definition order.
        """
        return (cls._member_map_[name] for name in cls._member_names_)

    def __len__(cls):
        return len(cls._member_names_)

    @property
    def __members__(cls):
        """
        Returns a mapping of member name->variant.

        This mapping lists all variants, including aliases. Note that this
        is a read-only view of the internal mapping.
        """
        return MappingProxyType(cls._member_map_)

    def __repr__(cls):
        return "<ADT %r>" % cls.__name__

    def __reversed__(cls):
        """
        Returns variants in reverse definition order.
        """
        return (cls._member_map_[name] for name in reversed(cls._member_names_))

    def __setattr__(cls, name, value):
        """
        Block attempts to reassign variants.

        Rebinding a variant on the class would leave the member maps and the
        isinstance registry pointing at the old one.
        """
        member_map = cls.__dict__.get("_member_map_", {})
        if name in member_map:
            raise AttributeError("Cannot reassign members.")
        super().__setattr__(name, value)

    @staticmethod
    def _check_for_existing_members(class_name, bases):
        for chain in bases:
            for base in chain.__mro__:
                if isinstance(base, ADTMeta) and base.__dict__.get("_member_names_"):
                    raise TypeError(
                        "%s: cannot extend ADT %r" % (class_name, base.__name__)
                    )

    @staticmethod
    def _gather_user_methods(classdict: dict[str, Any]) -> dict:
        res = {}
        for k, v in classdict.items():
            if callable(v) or isinstance(v, (classmethod, staticmethod, property)):
                res[k] = v

        return res


class ADT(metaclass=ADTMeta):
    """
    An algebraic data type.

    Derive from this class to define new algebraic data types. Nested classes
    (usually frozen dataclasses) become payload variants, any other public
    class attribute becomes a constant variant.
    """

    def __repr__(self):
        return "<%s.%s: %r>" % (self.__class__.__name__, self._name_, self._value_)

    def __str__(self):
        return "%s.%s" % (self.__class__.__name__, self._name_)

    def __hash__(self):
        return hash(self._name_)

    def __reduce_ex__(self, proto):
        return self.__class__, (self._value_,)

    # DynamicClassAttribute is used to provide access to the `name` and
    # `value` properties of constant variants while still allowing an ADT to
    # have variants named `name` and `value`.

    @DynamicClassAttribute
    def name(self):
        """The name of the constant variant."""
        return self._name_

    @DynamicClassAttribute
    def value(self):
        """The value of the constant variant."""
        return self._value_

    def __class_getitem__(cls, types):
        return GenericAlias(cls, types)
