"""Gravatar user profile vocabulary.

Keys live under ``gravatar.userProfile`` and are durable: never rename them.
"""

from __future__ import annotations

from extsearch.vocabulary import (
    CORE_USER_VOCABULARY,
    Vocabulary,
    VocabularyKeyDataType,
    VocabularyKeyVisibility,
)

_HIDDEN = VocabularyKeyVisibility.HIDDEN
_HIDDEN_IN_UI = VocabularyKeyVisibility.HIDDEN_IN_FRONTEND_UI


class GravatarUserVocabulary(Vocabulary):
    """Property slots populated from a Gravatar profile."""

    def __init__(self) -> None:
        super().__init__(
            vocabulary_name="Gravatar User Profile",
            key_prefix="gravatar.userProfile",
        )
        core = CORE_USER_VOCABULARY

        self.about_me = self.add("aboutMe")
        self.current_location = self.add(
            "currentLocation", VocabularyKeyDataType.GEOGRAPHY_LOCATION
        )
        self.display_name = self.add("displayName")
        self.hash = self.add("hash", visibility=_HIDDEN)
        self.id = self.add("id", visibility=_HIDDEN)
        self.name_family_name = self.add("nameFamilyName")
        self.name_given_name = self.add("nameGivenName")
        self.name_formatted = self.add("nameFormatted", VocabularyKeyDataType.PERSON_NAME)
        self.preferred_username = self.add("preferredUsername")
        self.request_hash = self.add("requestHash", visibility=_HIDDEN)
        self.profile_background_color = self.add("profileBackgroundColor")
        self.profile_background_url = self.add(
            "profileBackgroundUrl", VocabularyKeyDataType.URI, _HIDDEN
        )
        self.profile_url = self.add("profileUrl", VocabularyKeyDataType.URI, _HIDDEN_IN_UI)
        self.thumbnail_url = self.add("thumbnailUrl", VocabularyKeyDataType.URI, _HIDDEN)
        self.email = self.add("email", VocabularyKeyDataType.EMAIL)
        self.emails = self.add("emails", VocabularyKeyDataType.EMAIL)

        self.social_facebook = self.add("socialFacebook", visibility=_HIDDEN_IN_UI)
        self.social_foursquare = self.add("socialFoursquare", visibility=_HIDDEN_IN_UI)
        self.social_google = self.add("socialGoogle", visibility=_HIDDEN_IN_UI)
        self.social_linkedin = self.add("socialLinkedIn", visibility=_HIDDEN_IN_UI)
        self.social_twitter = self.add("socialTwitter", visibility=_HIDDEN_IN_UI)
        self.social_youtube = self.add("socialYouTube", visibility=_HIDDEN_IN_UI)
        self.social_blogger = self.add("socialBlogger", visibility=_HIDDEN_IN_UI)
        self.social_flickr = self.add("socialFlickr", visibility=_HIDDEN_IN_UI)
        self.social_goodreads = self.add("socialGoodReads", visibility=_HIDDEN_IN_UI)
        self.social_tripit = self.add("socialTripIt", visibility=_HIDDEN_IN_UI)
        self.social_tumblr = self.add("socialTumblr", visibility=_HIDDEN_IN_UI)
        self.social_vimeo = self.add("socialVimeo", visibility=_HIDDEN_IN_UI)
        self.social_wordpress = self.add("socialWordPress", visibility=_HIDDEN_IN_UI)
        self.social_yahoo = self.add("socialYahoo", visibility=_HIDDEN_IN_UI)

        self.currency_bitcoin = self.add("currencyBitcoin")
        self.currency_litecoin = self.add("currencyLitecoin")
        self.currency_dogecoin = self.add("currencyDogecoin")

        self.messaging_aim = self.add("messagingAIM")
        self.messaging_yahoo = self.add("messagingYahoo")
        self.messaging_icq = self.add("messagingIcq")
        self.messaging_gtalk = self.add("messagingGtalk")
        self.messaging_skype = self.add("messagingSkype")

        self.phone_number_mobile = self.add(
            "phoneNumberMobile", VocabularyKeyDataType.PHONE_NUMBER
        )
        self.phone_number_home = self.add("phoneNumberHome", VocabularyKeyDataType.PHONE_NUMBER)
        self.phone_number_work = self.add("phoneNumberWork", VocabularyKeyDataType.PHONE_NUMBER)

        self.add_mapping(self.name_family_name, core.last_name)
        self.add_mapping(self.name_given_name, core.first_name)
        self.add_mapping(self.name_formatted, core.full_name)
        self.add_mapping(self.current_location, core.location)
        self.add_mapping(self.email, core.email)
        self.add_mapping(self.emails, core.email_addresses)

        self.add_mapping(self.social_facebook, core.social_facebook)
        self.add_mapping(self.social_foursquare, core.social_foursquare)
        self.add_mapping(self.social_google, core.social_google_plus)
        self.add_mapping(self.social_linkedin, core.social_linkedin)
        self.add_mapping(self.social_twitter, core.social_twitter)
        self.add_mapping(self.social_youtube, core.social_youtube)
        self.add_mapping(self.social_blogger, core.social_blogger)
        self.add_mapping(self.social_flickr, core.social_flickr)
        self.add_mapping(self.social_goodreads, core.social_goodreads)
        self.add_mapping(self.social_tripit, core.social_tripit)
        self.add_mapping(self.social_tumblr, core.social_tumblr)
        self.add_mapping(self.social_vimeo, core.social_vimeo)
        self.add_mapping(self.social_wordpress, core.social_wordpress)
        self.add_mapping(self.social_yahoo, core.social_yahoo)

        self.add_mapping(self.messaging_aim, core.messaging_aim)
        self.add_mapping(self.messaging_yahoo, core.messaging_yahoo)
        self.add_mapping(self.messaging_icq, core.messaging_icq)
        self.add_mapping(self.messaging_gtalk, core.messaging_google_talk)
        self.add_mapping(self.messaging_skype, core.messaging_skype)

        self.add_mapping(self.phone_number_mobile, core.mobile_number)
        self.add_mapping(self.phone_number_home, core.home_phone_number)
        self.add_mapping(self.phone_number_work, core.phone_number)


GRAVATAR_USER_VOCABULARY = GravatarUserVocabulary()
