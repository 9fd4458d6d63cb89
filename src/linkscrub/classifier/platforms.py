"""Platform signature tables.

Each table is an ordered sequence of (platform name, regex) records. The
patterns are matched case-sensitively against the full URL text with
re.search; they are written to tolerate common host variants (www,
mobile subdomains, short-link domains) on their own.
"""

VIDEO_PLATFORMS = (
    ("youtube", r"(?:youtube\.com/watch\?v=|youtu\.be/|youtube\.com/embed/|youtube\.com/shorts/)"),
    ("youtube_mobile", r"(?:m\.youtube\.com/watch\?v=)"),
    ("vimeo", r"(?:vimeo\.com/|player\.vimeo\.com/)"),
    ("tiktok", r"(?:tiktok\.com/@[\w.-]+/video/|vm\.tiktok\.com/|tiktok\.com/t/)"),
    ("tiktok_mobile", r"(?:m\.tiktok\.com/)"),
    ("instagram", r"(?:instagram\.com/(?:p|reel|tv)/|instagr\.am/p/)"),
    ("facebook", r"(?:facebook\.com/watch\?v=|fb\.watch/|facebook\.com/.*/videos/)"),
    ("facebook_mobile", r"(?:m\.facebook\.com/watch/)"),
    ("twitch", r"(?:twitch\.tv/videos/|clips\.twitch\.tv/)"),
    ("twitch_mobile", r"(?:m\.twitch\.tv/)"),
    ("twitter", r"(?:twitter\.com/.*/status/.*/video/|x\.com/.*/status/)"),
    ("dailymotion", r"(?:dailymotion\.com/video/|dai\.ly/)"),
    ("rumble", r"(?:rumble\.com/|rumble\.com/embed/)"),
    ("bitchute", r"(?:bitchute\.com/video/)"),
    ("wistia", r"(?:wistia\.com/medias/|.*\.wistia\.com/)"),
    ("jwplayer", r"(?:jwplayer\.com/)"),
    ("brightcove", r"(?:players\.brightcove\.net/)"),
    ("vidyard", r"(?:vidyard\.com/watch/)"),
    ("loom", r"(?:loom\.com/share/)"),
    ("streamable", r"(?:streamable\.com/)"),
    ("giphy", r"(?:giphy\.com/gifs/|media\.giphy\.com/)"),
    ("reddit", r"(?:v\.redd\.it/)"),
    ("linkedin", r"(?:linkedin\.com/posts/.*-activity-.*video)"),
    ("coub", r"(?:coub\.com/view/)"),
    ("9gag", r"(?:9gag\.com/gag/)"),
    ("metacafe", r"(?:metacafe\.com/watch/)"),
    ("internet_archive", r"(?:archive\.org/details/)"),
    ("youku", r"(?:youku\.com/|v\.youku\.com/)"),
    ("bilibili", r"(?:bilibili\.com/video/|b23\.tv/)"),
    ("weibo", r"(?:weibo\.com/tv/show/)"),
    ("ok_ru", r"(?:ok\.ru/video/)"),
    ("vk", r"(?:vk\.com/video)"),
)

AUDIO_PLATFORMS = (
    ("spotify", r"(?:spotify\.com/track/|open\.spotify\.com/(?:track|episode|show)/|spotify\.link/)"),
    ("soundcloud", r"(?:soundcloud\.com/|on\.soundcloud\.com/)"),
    ("apple", r"(?:music\.apple\.com/|podcasts\.apple\.com/)"),
    ("youtube_music", r"(?:music\.youtube\.com/)"),
    ("bandcamp", r"(?:.*\.bandcamp\.com/|bandcamp\.com/)"),
    ("anchor", r"(?:anchor\.fm/)"),
    ("google_podcasts", r"(?:podcasts\.google\.com/)"),
    ("audiomack", r"(?:audiomack\.com/)"),
    ("deezer", r"(?:deezer\.com/track/|deezer\.page\.link/)"),
    ("tidal", r"(?:tidal\.com/track/|tidal\.com/album/)"),
    ("amazon_music", r"(?:music\.amazon\.com/)"),
    ("pandora", r"(?:pandora\.com/)"),
    ("lastfm", r"(?:last\.fm/music/)"),
    ("mixcloud", r"(?:mixcloud\.com/)"),
    ("podcast_players", r"(?:podcasts\.google\.com/|castbox\.fm/|player\.fm/)"),
    ("podcast_apps", r"(?:overcast\.fm/|pocketcasts\.com/)"),
    ("podcast_directories", r"(?:stitcher\.com/podcast/|tunein\.com/)"),
    ("podcast_hosts", r"(?:iheart\.com/podcast/|podbean\.com/)"),
    ("podcast_hosting", r"(?:spreaker\.com/|buzzsprout\.com/)"),
    ("radio", r"(?:radiocut\.fm/|radio\.com/)"),
    ("live_radio", r"(?:iheart\.com/live/|tunein\.com/radio/)"),
    ("audioboom", r"(?:audioboom\.com/)"),
    ("vocaroo", r"(?:vocaroo\.com/)"),
    ("clyp", r"(?:clyp\.it/)"),
    ("archive_audio", r"(?:archive\.org/details/.*\.(mp3|flac|ogg))"),
    ("netease_qq", r"(?:music\.163\.com/|y\.qq\.com/)"),
    ("kugou_kuwo", r"(?:kugou\.com/|kuwo\.cn/)"),
)

SOCIAL_PLATFORMS = (
    ("facebook", r"(?:facebook\.com/|fb\.com/|m\.facebook\.com/|fb\.me/)"),
    ("twitter", r"(?:twitter\.com/|x\.com/|t\.co/|mobile\.twitter\.com/)"),
    ("instagram", r"(?:instagram\.com/|instagr\.am/)"),
    ("linkedin", r"(?:linkedin\.com/|lnkd\.in/)"),
    ("tiktok", r"(?:tiktok\.com/|vm\.tiktok\.com/|tiktok\.com/t/|m\.tiktok\.com/)"),
    ("snapchat", r"(?:snapchat\.com/|snap\.com/)"),
    ("reddit", r"(?:reddit\.com/|redd\.it/|old\.reddit\.com/)"),
    ("pinterest", r"(?:pinterest\.com/|pin\.it/|pinterest\.ca/|pinterest\.co\.uk/)"),
    ("discord", r"(?:discord\.gg/|discord\.com/|discordapp\.com/)"),
    ("whatsapp", r"(?:wa\.me/|api\.whatsapp\.com/|web\.whatsapp\.com/)"),
    ("telegram", r"(?:t\.me/|telegram\.me/|telegram\.dog/)"),
    ("youtube_channel", r"(?:youtube\.com/c/|youtube\.com/user/|youtube\.com/channel/)"),
    ("tumblr", r"(?:tumblr\.com/|.*\.tumblr\.com/)"),
    ("mastodon", r"(?:mastodon\.social/|mastodon\.online/|.*\.social/@)"),
    ("threads", r"(?:threads\.net/)"),
    ("bereal", r"(?:bere\.al/)"),
    ("clubhouse", r"(?:clubhouse\.com/)"),
    ("twitch_channel", r"(?:twitch\.tv/(?!videos)[\w-]+$)"),
    ("vk", r"(?:vk\.com/|vkontakte\.ru/)"),
    ("weibo", r"(?:weibo\.com/|weibo\.cn/)"),
    ("wechat", r"(?:wechat\.com/)"),
    ("line", r"(?:line\.me/)"),
    ("viber", r"(?:viber\.com/)"),
    ("qq", r"(?:qq\.com/)"),
    ("nextdoor", r"(?:nextdoor\.com/)"),
    ("medium", r"(?:medium\.com/@|.*\.medium\.com/)"),
    ("quora", r"(?:quora\.com/)"),
    ("stackoverflow", r"(?:stackoverflow\.com/users/)"),
    ("flickr", r"(?:flickr\.com/photos/)"),
    ("deviantart", r"(?:deviantart\.com/|.*\.deviantart\.com/)"),
    ("behance", r"(?:behance\.net/)"),
    ("dribbble", r"(?:dribbble\.com/)"),
    ("foursquare", r"(?:foursquare\.com/|swarmapp\.com/)"),
    ("meetup", r"(?:meetup\.com/)"),
    ("eventbrite", r"(?:eventbrite\.com/)"),
    ("yelp", r"(?:yelp\.com/)"),
    ("goodreads", r"(?:goodreads\.com/)"),
    ("myspace", r"(?:myspace\.com/)"),
    ("xiaohongshu_douyin", r"(?:xiaohongshu\.com/|douyin\.com/)"),
    ("zhihu_tieba", r"(?:zhihu\.com/|baidu\.com/tieba/)"),
)
